"""Configuration management for gitfuns."""

from dataclasses import dataclass


@dataclass
class GitFunsConfig:
    """Configuration for log formatting and guided merges."""

    # Log formatting
    author_width: int = 16
    message_width: int = 80
    include_stats: bool = True
    date_format: str = "short"

    # Branch settings
    default_target_branch: str = "master"
    remote: str = "origin"

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if self.author_width <= 0:
            raise ValueError(
                f"author_width must be positive, got {self.author_width}")
        if self.message_width <= 0:
            raise ValueError(
                f"message_width must be positive, got {self.message_width}")

        if not isinstance(self.date_format, str) or not self.date_format:
            raise ValueError(
                f"date_format must be a non-empty string, got {self.date_format!r}")

        for name in ("default_target_branch", "remote"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")

            # Same characters git refuses in ref names
            invalid_chars = [' ', '\n', '\t', '..',
                             '~', '^', ':', '?', '*', '[', '\\']
            for char in invalid_chars:
                if char in value:
                    raise ValueError(
                        f"{name} contains invalid character '{char}': {value}")

    @classmethod
    def from_cli_args(cls, args) -> 'GitFunsConfig':
        """Create config from command line arguments."""
        try:
            return cls(
                include_stats=not getattr(args, 'no_stats', False),
                remote=getattr(args, 'remote', None) or cls.remote,
            )
        except ValueError as e:
            raise ValueError(
                f"Invalid configuration from command line arguments: {e}") from e

    def with_overrides(self, **kwargs) -> 'GitFunsConfig':
        """Create a new config with specific overrides."""
        fields = {field.name: getattr(self, field.name)
                  for field in self.__dataclass_fields__.values()}
        fields.update(kwargs)
        return GitFunsConfig(**fields)
