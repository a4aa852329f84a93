class WordleError(RuntimeError):
    """
    base class for errors that end the game
    """


class DictionaryError(WordleError):
    """
    dictionary file could not be opened or read
    """


class EmptyDictionaryError(DictionaryError):
    """
    dictionary file had no words of the right length
    """


class InputExhaustedError(WordleError):
    """
    input ran out (EOF) or failed before the game ended
    """
