"""Command-line driver for the provider.

Runs single lifecycle operations against the live API without a host
runtime, which is handy for checking credentials and inspecting remote state.

Examples:
    workos-provider import-read workos_organization org_123
    workos-provider import-read workos_organization_role org_123/org-billing-admin
    workos-provider lookup workos_user email=alice@example.com
    workos-provider delete workos_organization_membership om_123
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from dataclasses import fields
from typing import Dict, List, Optional

from .provider import DATA_SOURCES, RESOURCES, WorkOSProvider
from .resources import ResourceError, state_to_dict


def _parse_lookup_keys(pairs: List[str]) -> Dict[str, str]:
    keys = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected key=value, got {pair!r}")
        keys[name] = value
    return keys


def _print_state(state) -> None:
    print(json.dumps(state_to_dict(state, mask_sensitive=True), indent=2, sort_keys=True))


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="WorkOS provider driver")
    parser.add_argument("--api-key", default=None, help="WorkOS API key (default: WORKOS_API_KEY)")
    parser.add_argument("--client-id", default=None)
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    sub = parser.add_subparsers(dest="cmd")

    resource_types = [cls.type_name for cls in RESOURCES]
    data_source_types = [cls.type_name for cls in DATA_SOURCES]

    si = sub.add_parser("import-read", help="Import a resource by ID and print its refreshed state")
    si.add_argument("resource_type", choices=resource_types)
    si.add_argument("import_id")

    sd = sub.add_parser("delete", help="Delete a resource by import ID")
    sd.add_argument("resource_type", choices=resource_types)
    sd.add_argument("import_id")

    sl = sub.add_parser("lookup", help="Query a data source")
    sl.add_argument("data_source_type", choices=data_source_types)
    sl.add_argument("keys", nargs="*", metavar="key=value")

    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    provider = WorkOSProvider()
    try:
        provider.configure(api_key=args.api_key, client_id=args.client_id, base_url=args.base_url)

        if args.cmd == "import-read":
            resource = provider.resource(args.resource_type)
            imported = resource.import_state(args.import_id)
            for warning in imported.warnings:
                print(f"Warning: {warning}", file=sys.stderr)
            state = resource.read(imported.state)
            if state is None:
                print(f"Error: {args.resource_type} {args.import_id} does not exist", file=sys.stderr)
                return 1
            _print_state(state)
            return 0

        if args.cmd == "delete":
            resource = provider.resource(args.resource_type)
            resource.delete(resource.import_state(args.import_id).state)
            print(f"Deleted {args.resource_type} {args.import_id}")
            return 0

        if args.cmd == "lookup":
            data_source = provider.data_source(args.data_source_type)
            try:
                keys = _parse_lookup_keys(args.keys)
            except ValueError as err:
                parser.error(str(err))
            known = {item.name for item in fields(data_source.model)}
            unknown = sorted(set(keys) - known)
            if unknown:
                parser.error(f"Unknown attribute(s) for {args.data_source_type}: {', '.join(unknown)}")
            _print_state(data_source.read(data_source.model(**keys)))
            return 0
    except ResourceError as err:
        print(f"Error: {err.summary}", file=sys.stderr)
        if err.detail:
            print(err.detail, file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
