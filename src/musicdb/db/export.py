# ABOUTME: CSV export of the track catalog.
# ABOUTME: Writes title, artist, work code, tempo, key, and confidence with every field quoted.

import csv
from collections.abc import Iterable
from typing import TextIO

from musicdb.db.mapping import TrackRecord

CSV_HEADER = ["title", "artist", "work_code", "bpm", "key", "confidence"]


def write_tracks_csv(records: Iterable[TrackRecord], out: TextIO) -> int:
    """Write records as CSV to ``out`` and return the number of data rows.

    The header row is unquoted; missing values are written as empty strings.
    """
    out.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    count = 0
    for record in records:
        writer.writerow(
            [
                record.title,
                record.artist,
                record.work_code or "",
                record.bpm or "",
                record.key or "",
                record.confidence,
            ]
        )
        count += 1
    return count
