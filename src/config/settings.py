"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use PICMASK_ prefix (e.g., PICMASK_AUTOFILL=false).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use PICMASK_ prefix.

    Examples:
        PICMASK_NEEDS_INPUT=false
        PICMASK_MESSAGE_INPUT_MISMATCH="'{picture}' expected"
        PICMASK_HIGHLIGHT_BACKGROUND=dark
    """

    model_config = SettingsConfigDict(
        env_prefix="PICMASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Validator defaults
    needs_input: bool = Field(
        default=True,
        description="New picture validators reject empty input",
    )

    autofill: bool = Field(
        default=True,
        description="New picture validators insert literal mask characters while typing",
    )

    blanks_valid: bool = Field(
        default=False,
        description="New validators accept input consisting of blanks only",
    )

    # Messages
    message_input_required: str = Field(
        default="Input required.",
        description="Message for empty input when input is required",
    )

    message_blanks_not_allowed: str = Field(
        default="Input must not consist of blanks only.",
        description="Message for whitespace-only input",
    )

    message_picture_syntax: str = Field(
        default="Syntax error in picture '{picture}'.",
        description="Message for a malformed picture mask ({picture} is replaced)",
    )

    message_input_mismatch: str = Field(
        default="Input does not conform to picture '{picture}'.",
        description="Message for input not matching the picture ({picture} is replaced)",
    )

    # Mask library
    library_file: str = Field(
        default="",
        description="Mask library YAML file (empty: use the built-in library)",
    )

    # Output configuration
    report_filename: str = Field(
        default="picmask-report.json",
        description="Name of the JSON report written by the command line tool",
    )

    highlight_background: str = Field(
        default="light",
        description="Terminal background assumed when highlighting masks (light or dark)",
    )

    def message_format(self, template: str, picture: str) -> str:
        """
        Fill a message template with the picture it refers to.

        Args:
            template: Message template, may contain {picture}
            picture: Picture mask to insert

        Returns:
            Formatted message

        Example:
            >>> settings = AppSettings()
            >>> settings.message_format(settings.message_input_mismatch, "##")
            "Input does not conform to picture '##'."
        """
        return template.replace("{picture}", picture)

    def libraryPath_resolve(self) -> Path:
        """
        Resolve the mask library file to use.

        Returns:
            The configured library file, or the built-in library shipped
            inside the package when none is configured
        """
        if self.library_file:
            return Path(self.library_file)
        return Path(__file__).parent.parent / "masks" / "builtin.yaml"


# Singleton instance - import this in your code
appsettings = AppSettings()
