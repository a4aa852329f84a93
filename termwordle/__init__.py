from .wordle import Wordle, WORD_LENGTH, GUESS_LIMIT
from .dictionary import Dictionary, WORDS_CAPACITY, make_rng
from .session import GameSession, RoundResult, Status, Verdict
from .errors import WordleError, DictionaryError, EmptyDictionaryError, InputExhaustedError
