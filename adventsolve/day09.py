"""Disk Fragmenter: compacting a disk map and computing its checksum."""

from __future__ import annotations

Disk = list["int | None"]
_DIGITS = "0123456789"


def _sizes(disk_map: str) -> list[int]:
    sizes = []
    for ch in disk_map:
        if ch not in _DIGITS:
            raise ValueError(f"not a digit: {ch!r}")
        sizes.append(int(ch))
    return sizes


def disk_from_map(disk_map: str) -> list[int | None]:
    """Expand a dense map into blocks: file ids, or ``None`` for free space."""
    disk: list[int | None] = []
    for index, size in enumerate(_sizes(disk_map)):
        content = index // 2 if index % 2 == 0 else None
        disk.extend([content] * size)
    return disk


def render_disk(disk: list[int | None]) -> str:
    """One character per block: the first digit of the id, ``.`` when free."""
    return "".join("." if block is None else str(block)[0] for block in disk)


def compact_blocks(disk: list[int | None]) -> list[int | None]:
    """Move file blocks one at a time from the end into the leftmost gaps."""
    result = list(disk)
    free = (pos for pos, block in enumerate(disk) if block is None)
    filled = (pos for pos in reversed(range(len(disk))) if disk[pos] is not None)
    for free_pos, filled_pos in zip(free, filled):
        if free_pos > filled_pos:
            break
        result[free_pos] = result[filled_pos]
        result[filled_pos] = None
    return result


def compact_files(disk_map: str) -> list[int | None]:
    """Move whole files, highest id first, into the leftmost gap that fits."""
    sizes = _sizes(disk_map)
    if len(sizes) % 2 == 1:
        sizes.append(0)
    spans: list[tuple[int | None, int]] = []
    for file_id, (used, gap) in enumerate(zip(sizes[0::2], sizes[1::2])):
        spans.append((file_id, used))
        spans.append((None, gap))

    files = [span for span in spans if span[0] is not None]
    for span in reversed(files):
        file_id, size = span
        ridx = spans.index(span)
        target = next(
            (
                (lidx, lsize)
                for lidx, (content, lsize) in enumerate(spans)
                if content is None and lsize >= size
            ),
            None,
        )
        if target is None or target[0] > ridx:
            continue
        lidx, lsize = target
        spans[ridx] = (None, size)
        spans.insert(lidx, (file_id, size))
        spans[lidx + 1] = (None, lsize - size)

    disk: list[int | None] = []
    for content, size in spans:
        disk.extend([content] * size)
    return disk


def checksum(disk: list[int | None]) -> int:
    """Sum of each block's position times its file id."""
    return sum(pos * block for pos, block in enumerate(disk) if block is not None)


def solve(text: str) -> tuple[int, int]:
    disk_map = text.strip()
    return (
        checksum(compact_blocks(disk_from_map(disk_map))),
        checksum(compact_files(disk_map)),
    )