"""Error types for birthday-notifier.

Every failure that should end a run is raised as a subclass of
``BirthdayNotifierError``. The entry point turns these into a logged
diagnostic and a non-zero exit code.
"""


class BirthdayNotifierError(Exception):
    """Base exception for all birthday-notifier errors."""


class ConfigError(BirthdayNotifierError, ValueError):
    """config.toml is missing, is not valid TOML, or does not match the schema."""


class SourceReadError(BirthdayNotifierError):
    """The birthday CSV could not be opened, or one of its rows is malformed.

    Reading stops at the first bad row. Rows read before it are discarded too.
    """


class TransportError(BirthdayNotifierError):
    """Posting a message to the webhook failed.

    Covers network errors and non-success HTTP status codes.
    """
