"""
Tests for the CMS domain registry

Tests are organized by layer:
- test_entities.py / test_events.py: domain model, event args and notifier
- test_unit_of_work.py / test_domain_repository.py: persistence against SQLite
- test_domain_service.py / test_listeners.py: the registry facade and built-in listeners
- test_domains_api.py / test_manage_domains.py: HTTP and CLI surfaces
"""
