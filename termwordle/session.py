import enum
from dataclasses import dataclass
from typing import Optional

import blinker

import logging
logger = logging.getLogger(__name__)

from .signals import Signal
from .utils import count_true
from .wordle import Wordle, WORD_LENGTH, GUESS_LIMIT


class Status(enum.Enum):
    ACTIVE = 'active'
    WON    = 'won'
    LOST   = 'lost'


class Verdict(enum.Enum):
    OK        = 'ok'
    BAD_INPUT = 'bad input'  # wrong length
    NOT_FOUND = 'not found'  # not in dictionary
    GAME_OVER = 'game over'  # session already ended, guess ignored


@dataclass(frozen=True)
class RoundResult:
    guess: str
    verdict: Verdict
    resp: Optional[str]
    status: Status

    @property
    def valid(self) -> bool:
        return self.verdict == Verdict.OK


class GameSession:
    """
    one game against a fixed secret word

    every processed guess, valid or not, costs a round except the one that
    completes the word. the game is lost once `guess_limit` rounds are used.

    signals:
        guessed:        sent with `result=RoundResult` after every guess
        status_changed: sent with `value=Status` when the game ends
    """

    def __init__(self, secret, dictionary, guess_limit=GUESS_LIMIT):
        if len(secret) != WORD_LENGTH:
            raise ValueError(f"secret must be {WORD_LENGTH} letters: {secret!r}")

        if guess_limit < 1:
            raise ValueError(f"guess_limit must be at least 1: {guess_limit}")

        self._secret = secret
        self._dictionary = dictionary
        self._guess_limit = guess_limit
        self._rounds = 0
        self._mask = [False] * WORD_LENGTH

        self.guessed = blinker.Signal(doc='guessed')
        self.status_changed = Signal('status_changed', value=Status.ACTIVE, sender=self)

    @property
    def secret(self):
        return self._secret

    @property
    def rounds(self):
        return self._rounds

    @property
    def status(self) -> Status:
        return self.status_changed.value

    @property
    def active(self) -> bool:
        return self.status == Status.ACTIVE

    @property
    def success(self) -> bool:
        return self.status == Status.WON

    @property
    def mask(self):
        return tuple(self._mask)

    @property
    def remaining_guesses(self) -> int:
        return self._guess_limit - self._rounds

    def revealed_pattern(self):
        """
        secret letters at the positions guessed exactly, None elsewhere
        """
        return [
            c if revealed else None
            for c, revealed in zip(self._secret, self._mask)
        ]

    def validate_guess(self, guess) -> Verdict:
        if len(guess) != WORD_LENGTH:
            return Verdict.BAD_INPUT

        if guess not in self._dictionary:
            return Verdict.NOT_FOUND

        return Verdict.OK

    def _use_round(self):
        self._rounds += 1

        if self._rounds >= self._guess_limit:
            self.status_changed.value = Status.LOST

    def process_guess(self, guess) -> RoundResult:
        if not self.active:
            logger.debug(f"ignoring guess {guess!r}, game is {self.status.value}")
            return RoundResult(guess, Verdict.GAME_OVER, None, self.status)

        verdict = self.validate_guess(guess)

        if verdict != Verdict.OK:
            # invalid guesses still cost a round
            self._use_round()
            logger.debug(f"round {self._rounds}: {guess!r} rejected, {verdict.value}")
            return self._publish(RoundResult(guess, verdict, None, self.status))

        resp = Wordle.check_word(self._secret, guess)

        for i in Wordle.exact_positions(resp):
            self._mask[i] = True

        if count_true(self._mask) == WORD_LENGTH:
            self.status_changed.value = Status.WON
        else:
            self._use_round()

        logger.debug(f"round {self._rounds}: {guess!r} -> {resp}, {self.status.value}")
        return self._publish(RoundResult(guess, verdict, resp, self.status))

    def _publish(self, result):
        self.guessed.send(self, result=result)
        return result
