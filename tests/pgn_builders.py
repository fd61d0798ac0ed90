from __future__ import annotations

import io
import zipfile


def make_game(
    white: str = "Carlsen, Magnus",
    black: str = "Anand, Viswanathan",
    *,
    event: str = "World Championship",
    date: str = "2013.11.09",
    round_: str = "1",
    white_elo: int | None = 2870,
    black_elo: int | None = 2775,
    result: str = "1-0",
    moves: str = "1. e4 e5 2. Nf3 Nc6 3. Bb5 a6",
    extra: dict[str, str] | None = None,
) -> str:
    headers = {
        "Event": event,
        "Site": "Chennai IND",
        "Date": date,
        "Round": round_,
        "White": white,
        "Black": black,
        "Result": result,
    }
    if white_elo is not None:
        headers["WhiteElo"] = str(white_elo)
    if black_elo is not None:
        headers["BlackElo"] = str(black_elo)
    headers.update(extra or {})
    header_block = "\n".join(f'[{key} "{value}"]' for key, value in headers.items())
    return f"{header_block}\n\n{moves} {result}\n"


def join_games(games: list[str]) -> str:
    return "\n".join(games)


def make_archive(text: str, entry_name: str = "games.pgn") -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(entry_name, text)
    return buffer.getvalue()


def numbered_games(count: int, *, prefix: str = "Player", **kwargs) -> list[str]:
    return [make_game(f"{prefix} {number}", f"Opponent {number}", **kwargs) for number in range(count)]


def corrupt_compressed_data(archive: bytes, entry_name: str = "games.pgn", length: int = 55) -> bytes:
    """Overwrite the start of an entry's deflate stream, leaving the directory intact."""

    data_start = 30 + len(entry_name.encode("utf-8"))
    damaged = bytearray(archive)
    damaged[data_start : data_start + length] = b"\xff" * length
    return bytes(damaged)
