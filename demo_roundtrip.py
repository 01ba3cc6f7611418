#!/usr/bin/env python3
"""
Demo: Read non-conformant CSV and write it back as clean RFC 4180.

Shows how the reader resolves quoting edge cases and how the
writer re-encloses fields that need it.
"""

import io

from simplecsv import SimpleCsvReader, SimpleCsvWriter, NewlineType, WriterOptions


MESSY_INPUT = (
    'id,name,comment\r\n'
    '1,"Smith, J","said ""hi"""\r\n'
    '2,O"Brien,quote mid-field\r\n'
    '3,"4"5,text after closing quote\r\n'
    '\r\n'
    '4,trailing,\r\n'
    '5,"unterminated\n'
)


def main():
    print("=" * 80)
    print("INPUT")
    print("=" * 80)
    print(MESSY_INPUT)

    reader = SimpleCsvReader(io.BytesIO(MESSY_INPUT.encode("utf-8")))
    records = list(reader)

    print("=" * 80)
    print(f"PARSED ({reader.records_read} records, {reader.line_num} lines)")
    print("=" * 80)
    for record in records:
        print(record)

    writer = SimpleCsvWriter(io.BytesIO(), WriterOptions(newline=NewlineType.WINDOWS, trailing_terminator=True))
    writer.write_all(records)

    print("\n" + "=" * 80)
    print("REWRITTEN")
    print("=" * 80)
    print(writer.into_inner().getvalue().decode("utf-8"))


if __name__ == "__main__":
    main()
