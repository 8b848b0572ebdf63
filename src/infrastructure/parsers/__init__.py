"""Parsers for backend response bodies."""

from .interfaces import (
    HTTPClientProtocol,
    ParsingError,
    QuestionAPIClientProtocol,
    QuestionParserProtocol,
)
from .question_parser import QuestionParser, QuestionPayload, TestCasePayload

__all__ = [
    "HTTPClientProtocol",
    "ParsingError",
    "QuestionAPIClientProtocol",
    "QuestionParser",
    "QuestionParserProtocol",
    "QuestionPayload",
    "TestCasePayload",
]
