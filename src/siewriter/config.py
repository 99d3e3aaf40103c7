"""Configuration for SIE export."""

import os
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from siewriter import __version__
from siewriter.utils.date_parser import parse_date

DEFAULT_GENERATOR = "siewriter"


@dataclass(frozen=True)
class DumpOptions:
    """Options written to the #PROGRAM and #GEN records.

    Attributes:
        generator: Name of the generating program
        generator_version: Version of the generating program
        generated_date: Date the file was generated
        generated_sign: Optional signature of the person or process that
            generated the file
    """

    generator: str = DEFAULT_GENERATOR
    generator_version: str = __version__
    generated_date: date = field(default_factory=date.today)
    generated_sign: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DumpOptions":
        """Create options from environment variables.

        Reads SIE_GENERATOR, SIE_GENERATOR_VERSION, SIE_GENERATED_DATE and
        SIE_GENERATED_SIGN; unset variables keep their defaults.

        Raises:
            ValueError: If SIE_GENERATED_DATE cannot be parsed
        """
        generated_date_str = os.getenv("SIE_GENERATED_DATE")
        generated_date = parse_date(generated_date_str) if generated_date_str else date.today()

        return cls(
            generator=os.getenv("SIE_GENERATOR", DEFAULT_GENERATOR),
            generator_version=os.getenv("SIE_GENERATOR_VERSION", __version__),
            generated_date=generated_date,
            generated_sign=os.getenv("SIE_GENERATED_SIGN") or None,
        )
