WORD_LENGTH = 5
GUESS_LIMIT = 5


class Wordle:

    LETTER_IN    = 'i' # in, in word but wrong spot
    LETTER_OUT   = 'o' # out, not in word
    LETTER_EXACT = 'e' # exact spot

    @classmethod
    def check_word(cls, word, guess):
        """
        return a response for the given guess

        NOTE: a letter only has to occur somewhere in word to be marked
        LETTER_IN, so a guess with a repeated letter can get several
        LETTER_IN marks even if word has that letter once.
        """

        resp = ''

        for i in range(WORD_LENGTH):
            if guess[i] == word[i]:
                resp += cls.LETTER_EXACT
            elif guess[i] in word:
                resp += cls.LETTER_IN
            else:
                resp += cls.LETTER_OUT

        return resp

    @classmethod
    def exact_positions(cls, resp):
        return [i for i, r in enumerate(resp) if r == cls.LETTER_EXACT]
