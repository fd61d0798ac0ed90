from datetime import UTC, datetime


class Now:
    @staticmethod
    def as_datetime() -> datetime:
        """Return the current UTC time as a datetime object."""

        return datetime.now(UTC)

    @staticmethod
    def as_iso() -> str:
        """Return the current UTC time as an ISO-8601 string."""

        return datetime.now(UTC).isoformat()
