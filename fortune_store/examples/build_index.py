# ==================================================
# examples/build_index.py
# ==================================================
import argparse, sys
from pathlib import Path

from fortune_store.const import INDEX_SUFFIX, DEFAULT_DELIMITER
from fortune_store.index import build_index, decode_index

def main(argv=None):
    p = argparse.ArgumentParser(description="write the <file>.dat index for a fortune data file")
    p.add_argument("data", help="path to fortune data file")
    p.add_argument("-c", "--delimiter", default=DEFAULT_DELIMITER.decode(),
                   help="single character on the line separating records")
    p.add_argument("-o", "--output", help=f"index path (default: <data>{INDEX_SUFFIX})")
    args = p.parse_args(argv)

    data = Path(args.data).read_bytes()
    out  = Path(args.output or args.data + INDEX_SUFFIX)
    try:
        raw = build_index(data, args.delimiter.encode())
    except ValueError as e:
        print(f"{args.data}: {e}", file=sys.stderr)
        return 1
    out.write_bytes(raw)

    header, _ = decode_index(raw)
    print(f'"{out}" created')
    print(f"There were {header.record_count} strings")
    print(f"Longest string: {header.longest_record_len} bytes")
    print(f"Shortest string: {header.shortest_record_len} bytes")
    return 0

if __name__ == "__main__":
    sys.exit(main())
