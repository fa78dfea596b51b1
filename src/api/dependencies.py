import os

from api.backend import BackendAPI
from extraction.text_parser import TextCommandParser

# Configuration
PARSER_TIMEZONE = os.getenv("PARSER_TIMEZONE", "UTC")

parser = TextCommandParser(timezone=PARSER_TIMEZONE)
backend = BackendAPI(parser=parser)


def get_parser() -> TextCommandParser:
    return parser


def get_backend() -> BackendAPI:
    return backend
