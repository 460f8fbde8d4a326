"""Parser for line-oriented ranked ballots.

Each line of input holds one ballot. Fields separated by ``,`` are ranked in
the order they appear, most preferred first. Names joined by ``=`` inside a
field share the same rank. Both separators follow CSV quoting rules, so a
name containing a comma can be quoted::

    Tom,Sally=Dan
    Bob,"Smith, Pat",Dan

Candidates left off a line rank below everyone on it. Blank lines and empty
fields are skipped.
"""

import csv
import io
import logging
from collections.abc import Callable, Iterable, Iterator

from condorcet.models import Ballot, CandidateID, InvalidBallot
from condorcet.parsers.base import (
    BallotParseError,
    BallotSourceError,
    CandidateParseError,
    CyclicBallotError,
)
from condorcet.parsers.normalize import default_normalizer

logger = logging.getLogger(__name__)


class BallotReader:
    """Reads ballots from a source of text lines.

    Args:
        source: An iterable of lines (e.g. an open text file) or a whole
            string, which is split into lines.
        parse_id: Converts each name into a CandidateID, raising ValueError
            to reject it. See condorcet.parsers.normalize.
    """

    FIELD_DELIMITER = ","
    GROUP_DELIMITER = "="
    QUOTE_CHAR = '"'

    def __init__(
        self,
        source: Iterable[str] | str,
        parse_id: Callable[[str], CandidateID],
    ):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._lines: Iterator[str] = iter(source)
        self.parse_id = parse_id
        self.line_number = 0

    def read(self) -> Ballot | None:
        """Read and parse the next line.

        Returns:
            The parsed ballot, or None if the line names no candidates

        Raises:
            EOFError: If the source is exhausted
            BallotParseError: If the line is malformed
            BallotSourceError: If the source itself fails
        """
        return self.parse_line(self._next_line())

    def read_all(self) -> tuple[list[Ballot], list[InvalidBallot]]:
        """Read until the source is exhausted.

        Malformed lines are collected as InvalidBallots rather than raised,
        so one bad ballot never discards the rest. A failing source still
        raises BallotSourceError.

        Returns:
            (ballots in input order, rejected lines in input order)
        """
        valid: list[Ballot] = []
        invalid: list[InvalidBallot] = []

        while True:
            try:
                ballot = self.read()
            except EOFError:
                break
            except BallotParseError as e:
                logger.info("rejecting line %d: %s", self.line_number, e)
                invalid.append(InvalidBallot(line=self.line_number, issue=str(e)))
                continue

            if ballot is None:
                logger.debug("line %d names no candidates, skipping", self.line_number)
                continue
            valid.append(ballot)

        logger.info(
            "read %d ballots from %d lines, %d rejected",
            len(valid), self.line_number, len(invalid),
        )
        return valid, invalid

    def parse_line(self, line: str) -> Ballot | None:
        """Parse a single ballot line.

        Returns:
            The ballot, or None if the line names no candidates

        Raises:
            BallotParseError: If the quoting is malformed
            CandidateParseError: If parse_id rejects a name
            CyclicBallotError: If a candidate appears twice on the line
        """
        ballot: Ballot = {}
        rank = 0

        for field in self._split(line, self.FIELD_DELIMITER):
            group = [
                name for name in self._split(field, self.GROUP_DELIMITER)
                if name.strip()
            ]
            # Empty fields don't use up a rank
            if not group:
                continue

            for name in group:
                try:
                    candidate = self.parse_id(name)
                except ValueError as e:
                    raise CandidateParseError(
                        f"could not parse candidate ID: {e}"
                    ) from e
                if candidate in ballot:
                    raise CyclicBallotError(candidate)
                ballot[candidate] = rank
            rank += 1

        return ballot or None

    def _next_line(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise EOFError("end of ballot input") from None
        except (OSError, UnicodeDecodeError) as e:
            raise BallotSourceError(
                f"could not read line {self.line_number + 1}: {e}"
            ) from e
        self.line_number += 1
        return line.rstrip("\r\n")

    def _split(self, text: str, delimiter: str) -> list[str]:
        """Split text on delimiter with CSV quoting (strict)."""
        self._check_bare_quotes(text, delimiter)
        reader = csv.reader(
            [text], delimiter=delimiter, quotechar=self.QUOTE_CHAR, strict=True
        )
        try:
            return next(reader, [])
        except csv.Error as e:
            raise BallotParseError(f"could not read record: {e}") from e

    def _check_bare_quotes(self, text: str, delimiter: str) -> None:
        """Reject a quote inside a field that does not start with one.

        csv treats such a quote as an ordinary character even in strict
        mode, so ``bob, "Smith, Pat"`` would otherwise split into three names.
        """
        in_quotes = False
        field_start = True
        prev = ""
        for ch in text:
            if in_quotes:
                if ch == self.QUOTE_CHAR:
                    in_quotes = False
            elif ch == delimiter:
                field_start = True
                prev = ch
                continue
            elif ch == self.QUOTE_CHAR:
                # A quote straight after a closing quote is an escaped ""
                if not (field_start or prev == self.QUOTE_CHAR):
                    raise BallotParseError(
                        'could not read record: bare " in non-quoted field'
                    )
                in_quotes = True
            field_start = False
            prev = ch


def read_all(
    source: Iterable[str] | str,
    parse_id: Callable[[str], CandidateID] | None = None,
) -> tuple[list[Ballot], list[InvalidBallot]]:
    """Read every ballot from source.

    Args:
        source: An iterable of lines or a whole string
        parse_id: Name normalizer; defaults to a fresh default_normalizer()

    Returns:
        (ballots, invalid lines)

    Raises:
        BallotSourceError: If the source fails before end of input
    """
    if parse_id is None:
        parse_id = default_normalizer()
    return BallotReader(source, parse_id).read_all()
