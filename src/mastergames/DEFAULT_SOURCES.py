"""Built-in archive list used when no sources file is configured."""

# pylint: disable=invalid-name

from mastergames.source_descriptor import SourceDescriptor

DEFAULT_SOURCES: tuple[SourceDescriptor, ...] = (
    SourceDescriptor(label="Carlsen", archive_name="Carlsen.zip"),
    SourceDescriptor(label="Kasparov", archive_name="Kasparov.zip"),
    SourceDescriptor(label="Nakamura", archive_name="Nakamura.zip"),
    SourceDescriptor(label="Anand", archive_name="Anand.zip"),
    SourceDescriptor(label="Fischer", archive_name="Fischer.zip"),
    SourceDescriptor(
        label="Lichess Elite Dec 2024",
        archive_name="lichess_elite_2024-12.zip",
        url="https://database.nikonoel.fr/lichess_elite_2024-12.zip",
        source_tag="lichess-elite",
        require_titles=True,
    ),
)
