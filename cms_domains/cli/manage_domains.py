#!/usr/bin/env python3
"""
CLI tool to manage domains.

Usage:
    python -m cms_domains.cli.manage_domains list [--include-wildcards] [--content-id ID]
    python -m cms_domains.cli.manage_domains add --name shop.example.com --content-id 42 [--language en-US]
    python -m cms_domains.cli.manage_domains remove --name shop.example.com
    python -m cms_domains.cli.manage_domains exists --name shop.example.com

Examples:
    # Map a hostname to content item 1234
    python -m cms_domains.cli.manage_domains add --name www.example.com --content-id 1234

    # Add a wildcard (culture-only) domain
    python -m cms_domains.cli.manage_domains add --name "*1234" --language da-DK

    # List every domain, including wildcards
    python -m cms_domains.cli.manage_domains list --include-wildcards
"""
import asyncio
import argparse
import sys
from typing import Optional

from cms_domains.application.domain_service import DomainService
from cms_domains.application.listeners import DomainAuditListener
from cms_domains.core.logging import configure_logging
from cms_domains.db import init_db, close_db
from cms_domains.domain.entities import Domain, DomainRegistryError
from cms_domains.domain.events import DomainEventNotifier
from cms_domains.domain.operation_status import OperationStatus
from cms_domains.domain.unit_of_work import get_unit_of_work_provider


def _print_status(action: str, name: str, result: OperationStatus) -> None:
    if result.is_success:
        print(f"[SUCCESS] Domain '{name}' {action}")
    else:
        print(f"[CANCELLED] {action.capitalize()} of domain '{name}' was cancelled")
    for message in result.event_messages:
        print(f"  [{message.message_type.value}] {message.category}: {message.message}")


async def list_domains(
    service: DomainService,
    include_wildcards: bool = False,
    content_id: Optional[int] = None
) -> int:
    """List domains, optionally only those assigned to content_id"""
    if content_id is not None:
        domains = await service.get_assigned_domains(content_id, include_wildcards)
    else:
        domains = await service.get_all(include_wildcards)

    if not domains:
        print("No domains found")
        return 0

    print(f"\n{'ID':<6} {'Name':<40} {'Content':<10} {'Language':<10}")
    print("-" * 70)
    for domain in domains:
        content = "*" if domain.is_wildcard else str(domain.root_content_id)
        language = domain.language_iso_code or "-"
        print(f"{domain.id:<6} {domain.name:<40} {content:<10} {language:<10}")
    print(f"\nTotal: {len(domains)} domain(s)")
    return 0


async def add_domain(
    service: DomainService,
    name: str,
    content_id: Optional[int] = None,
    language: Optional[str] = None
) -> int:
    """Create a domain; exits non-zero if cancelled"""
    domain = Domain(name=name, root_content_id=content_id, language_iso_code=language)
    result = await service.save(domain)
    _print_status("added", domain.name, result)
    if result.is_success:
        print(f"  ID: {domain.id}")
        return 0
    return 1


async def remove_domain(service: DomainService, name: str) -> int:
    """Delete a domain by name"""
    domain = await service.get_by_name(name)
    if domain is None:
        print(f"[ERROR] Domain '{name}' not found")
        return 1

    result = await service.delete(domain)
    _print_status("removed", name, result)
    return 0 if result.is_success else 1


async def domain_exists(service: DomainService, name: str) -> int:
    """Exit code 0 if the domain exists, 1 otherwise"""
    if await service.exists(name):
        print(f"Domain '{name}' exists")
        return 0
    print(f"Domain '{name}' does not exist")
    return 1


async def run(args: argparse.Namespace) -> int:
    """Initialise the database, execute one command, and clean up"""
    await init_db(args.database_url)
    service = DomainService(
        get_unit_of_work_provider(),
        DomainEventNotifier([DomainAuditListener()])
    )

    try:
        if args.command == 'list':
            return await list_domains(service, args.include_wildcards, args.content_id)
        elif args.command == 'add':
            return await add_domain(service, args.name, args.content_id, args.language)
        elif args.command == 'remove':
            return await remove_domain(service, args.name)
        elif args.command == 'exists':
            return await domain_exists(service, args.name)
        raise ValueError(f"Unknown command: {args.command}")
    except (DomainRegistryError, ValueError) as e:
        print(f"[ERROR] {e}")
        return 1
    finally:
        await close_db()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Manage CMS domains',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--database-url', help='Database URL (defaults to DATABASE_URL)')
    parser.add_argument('--log-level', default=None, help='Log level (defaults to LOG_LEVEL)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # List domains command
    list_parser = subparsers.add_parser('list', help='List domains')
    list_parser.add_argument('--include-wildcards', action='store_true', help='Include domains without content')
    list_parser.add_argument('--content-id', type=int, help='Only domains assigned to this content item')

    # Add domain command
    add_parser = subparsers.add_parser('add', help='Add a domain')
    add_parser.add_argument('--name', required=True, help='Hostname or hostname + path')
    add_parser.add_argument('--content-id', type=int, help='Root content item (omit for wildcard)')
    add_parser.add_argument('--language', help='Culture ISO code, e.g. en-US')

    # Remove domain command
    remove_parser = subparsers.add_parser('remove', help='Remove a domain')
    remove_parser.add_argument('--name', required=True, help='Domain name to remove')

    # Exists command
    exists_parser = subparsers.add_parser('exists', help='Check whether a domain exists')
    exists_parser.add_argument('--name', required=True, help='Domain name to check')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    sys.exit(asyncio.run(run(args)))


if __name__ == '__main__':
    main()
