"""Pairing of delta headers with delta bodies into one document."""

from __future__ import annotations

from typing import Sequence

from rcs_parser.errors import RcsMergeError
from rcs_parser.nodes import Delta, DeltaText, Num, RcsData

# (offset in the source, parsed node)
Located = tuple[int, Delta]
LocatedText = tuple[int, DeltaText]


def build_deltas(
    headers: Sequence[Located],
    bodies: Sequence[LocatedText],
) -> dict[Num, Delta]:
    """Copy each body's log and text into the header with the same revision.

    Every body needs exactly one header and every header exactly one body.
    The result is ordered by revision number.
    """
    deltas: dict[Num, Delta] = {}
    header_offsets: dict[Num, int] = {}
    for offset, delta in headers:
        if delta.num in deltas:
            raise RcsMergeError(f"duplicate delta for revision {delta.num}", offset, delta.num)
        deltas[delta.num] = delta
        header_offsets[delta.num] = offset

    merged: set[Num] = set()
    for offset, deltatext in bodies:
        num = deltatext.num
        if num not in deltas:
            raise RcsMergeError(f"deltatext for revision {num} has no matching delta", offset, num)
        if num in merged:
            raise RcsMergeError(f"duplicate deltatext for revision {num}", offset, num)
        deltas[num] = deltas[num].model_copy(update={"log": deltatext.log, "text": deltatext.text})
        merged.add(num)

    for num, offset in header_offsets.items():
        if num not in merged:
            raise RcsMergeError(f"delta for revision {num} has no deltatext", offset, num)

    return dict(sorted(deltas.items(), key=lambda item: item[0]))


def assemble_document(
    admin: RcsData,
    desc: str,
    headers: Sequence[Located],
    bodies: Sequence[LocatedText],
) -> RcsData:
    deltas = build_deltas(headers, bodies)
    return admin.model_copy(update={"desc": desc, "deltas": deltas})
