"""
Command-line access to the share codec: export a stored list as a transport
string, inspect a transport string, or import one into the list store.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from basket.infra.List_Repository import ListRepository
from basket.logic.share.assembler import apply_share_payload, build_share_payload
from basket.logic.share.codec import decode_share_payload, encode_share
from basket.logic.share.compression import BinaryCompressor, probe_compression
from basket.utilities.constants import IMPORT_MODES
from basket.utilities.exceptions import BasketError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Encode, decode and import shared shopping lists')
    parser.add_argument('--store', help='List store JSON file (defaults to the configured data dir)')
    parser.add_argument('--no-compression', action='store_true', help='Emit the plain compact JSON form')
    sub = parser.add_subparsers(dest='action', required=True)

    enc = sub.add_parser('encode', help='Print the transport string for a stored list')
    enc.add_argument('--list-id', required=True)

    dec = sub.add_parser('decode', help='Decode a transport string and print it as JSON')
    dec.add_argument('payload')

    imp = sub.add_parser('import', help='Import a transport string into the list store')
    imp.add_argument('payload')
    imp.add_argument('--mode', choices=IMPORT_MODES, default='new')
    imp.add_argument('--target', help='Existing list id (merge mode)')
    return parser


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    repo = ListRepository(Path(args.store) if args.store else None)
    compressor = BinaryCompressor(probe_compression('off' if args.no_compression else 'auto'))

    if args.action == 'encode':
        payload = build_share_payload(repo, args.list_id)
        if payload is None:
            print(f"✗ List not found: {args.list_id}", file=sys.stderr)
            return 1
        print(encode_share(payload, compressor).transport)
        return 0

    payload = decode_share_payload(args.payload, compressor)
    if payload is None:
        print("✗ Invalid payload", file=sys.stderr)
        return 1

    if args.action == 'decode':
        print(json.dumps(payload.to_dict(), indent=2, ensure_ascii=False))
        return 0

    try:
        result = apply_share_payload(repo, payload, args.mode, args.target)
    except BasketError as e:
        print(f"✗ Import failed: {e}", file=sys.stderr)
        return 1
    if not result.complete:
        print(f"✗ Imported {result.imported}/{result.total} items into {result.list_id}: {result.error}", file=sys.stderr)
        return 2
    print(f"✓ Imported {result.imported} items into list {result.list_id}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(run())
