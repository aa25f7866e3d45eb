import sys

from bitbyte.byte import Byte, format_table

DEFAULT_COUNT = 16


def parse_value(s: str) -> Byte:
    # accepts 161, 0xa1 or 0b10100001
    return Byte.from_raw(int(s, 0))


def dump_line(offset: int, byte: Byte) -> str:
    lsb_first = "".join(str(int(b)) for b in byte)
    return f"  {offset:08x}  {byte.as_raw():02x}  {byte}  lsb-first {lsb_first}"


def dump(v: bytes, count: int = DEFAULT_COUNT) -> None:
    print(f" size {len(v)} showing {min(count, len(v))}")
    for offset, raw in enumerate(v[:count]):
        print(dump_line(offset, Byte.from_raw(raw)))


def main(argv) -> int:
    if len(argv) < 2:
        print(f"usage: {argv[0]} FILE [COUNT] | --table VALUE", file=sys.stderr)
        return 2
    if argv[1] == "--table":
        if len(argv) != 3:
            print(f"usage: {argv[0]} --table VALUE", file=sys.stderr)
            return 2
        try:
            byte = parse_value(argv[2])
        except (TypeError, ValueError) as e:
            print(f"bad value {argv[2]!r}: {e}", file=sys.stderr)
            return 1
        print(repr(byte))
        print(format_table(byte))
        return 0

    count = DEFAULT_COUNT
    if len(argv) > 2:
        try:
            count = int(argv[2])
        except ValueError:
            count = -1
        if count < 0:
            print(f"bad count {argv[2]!r}: must be an integer >= 0", file=sys.stderr)
            return 2
    print(argv[1])
    with open(argv[1], "rb") as f:
        dump(f.read(), count)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
