# ==================================================
# fortune_store/const.py
# ==================================================
HEADER_FMT = ">IIIIIB3x"  # version, count, longest, shortest, flags, delim (+3 pad)
HEADER_SIZE = 24          # bytes (5*4 + 1 + 3 padding)
OFFSET_FMT = ">I"         # 4‑byte big‑endian offset into the data file
OFFSET_SIZE = 4
OFFSET_DTYPE = ">u4"      # numpy view of OFFSET_FMT
INDEX_VERSION = 2
INDEX_SUFFIX = ".dat"     # index file = <category>.dat, data file = <category>
PADDING = 3               # every record is followed by b"\n%\n"
DEFAULT_DELIMITER = b"%"

# strfile flag bits (carried through, never interpreted)
STR_RANDOM   = 0x1
STR_ORDERED  = 0x2
STR_ROTATED  = 0x4
STR_COMMENTS = 0x8
