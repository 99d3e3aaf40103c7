"""SIE export: field encoding and document assembly."""

from siewriter.export.encoding import CODEPAGE, encode_document, escape_field
from siewriter.export.sie_dumper import SIEDumper, build_line

__all__ = ["CODEPAGE", "SIEDumper", "build_line", "encode_document", "escape_field"]
