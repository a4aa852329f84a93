import pathlib

import click
from rich.console import Console
from rich.style import Style
from rich.text import Text

import logging
logger = logging.getLogger(__name__)

from .dictionary import Dictionary, make_rng
from .errors import WordleError, InputExhaustedError
from .session import GameSession, Verdict
from .utils import dotdict
from .wordle import Wordle, WORD_LENGTH

print = Console(color_system='truecolor', highlight=False).print


class WordleUI:

    STYLE_IN    = Style.parse('bold #ffffff on #c9b458')
    STYLE_OUT   = Style.parse('bold #ffffff on #dc143c')
    STYLE_EXACT = Style.parse('bold #ffffff on #6aaa64')

    BLANK = '-'

    MESSAGES = {
        Verdict.BAD_INPUT: f"Bad input (must be {WORD_LENGTH} letters)",
        Verdict.NOT_FOUND: "No such word in dictionary",
    }

    @classmethod
    def colorize(cls, code, text):
        """
        colorize text for the terminal
        code: a Wordle.LETTER_X response
        text: the text to color
        """
        if code == Wordle.LETTER_IN:
            style = cls.STYLE_IN
        elif code == Wordle.LETTER_OUT:
            style = cls.STYLE_OUT
        elif code == Wordle.LETTER_EXACT:
            style = cls.STYLE_EXACT
        else:
            raise RuntimeError(f"unknown code: {code}")

        return Text(text, style=style)

    @classmethod
    def colorize_word(cls, resp, word):
        return Text.assemble(*[
            cls.colorize(r, w)
            for r, w in zip(resp, word)
        ])

    @classmethod
    def format_pattern(cls, pattern):
        return ''.join([c if c is not None else cls.BLANK for c in pattern])

    def __init__(self, args):
        args = dotdict(args)

        self.args = args
        self.dictionary = Dictionary.load(args.dict)
        self.rng = make_rng(args.seed)
        self.session = None

    def pick_word(self):
        if self.args.start_word:
            logger.debug("using given word")
            return self.args.start_word

        return self.dictionary.pick_word(self.rng)

    def new_session(self):
        self.session = GameSession(self.pick_word(), self.dictionary)
        self.session.guessed.connect(self.cb_guessed)
        self.session.status_changed.connect(self.cb_status)
        return self.session

    def show_prompt(self):
        pattern = self.format_pattern(self.session.revealed_pattern())
        print(Text(pattern))
        print(f"\n{self.session.remaining_guesses}> ", end='')

    def get_guess(self):
        try:
            return input()
        except (EOFError, OSError) as e:
            raise InputExhaustedError("Error or EOF reading input.") from e

    def print_response(self, resp, guess):
        print(self.colorize_word(resp, guess))

    def cb_guessed(self, sender, result):
        if result.valid:
            self.print_response(result.resp, result.guess)
        elif result.verdict in self.MESSAGES:
            print(self.MESSAGES[result.verdict])

    def cb_status(self, sender, value):
        logger.info(f"game over: {value.value}")

    def show_summary(self):
        print(Text(f"\nThe correct word was: '{self.session.secret}'"))

        if self.session.success:
            print("[bold green]Congrats, you guessed correctly![/bold green]")
        else:
            print("[bold yellow]You lost. Better luck next time.[/bold yellow]")

    def play(self):
        self.new_session()

        while self.session.active:
            self.show_prompt()
            self.session.process_guess(self.get_guess())

        self.show_summary()
        return self.session.success


def validate_start_word(ctx, param, value):
    if value is not None and len(value) != WORD_LENGTH:
        raise click.BadParameter(f"must be {WORD_LENGTH} letters")
    return value


@click.command()
@click.option('--dict', default='words.txt', type=click.Path(dir_okay=False, path_type=pathlib.Path))
@click.option('--seed', type=int, help="seed for picking the word, defaults to our pid")
@click.option('-v', '--verbose', is_flag=True, help="show debug logging")
@click.argument('start_word', required=False, callback=validate_start_word)
@click.pass_context
def cli(ctx, *args, **kw):
    """
    play a game of wordle

    you get 5 guesses at a 5 letter word. wrong length guesses and words
    that aren't in the dictionary cost a guess too.

    provide a START_WORD to force a specific one (useful for testing) or
    omit and a random word from the dictionary file will be chosen.
    """

    logging.basicConfig(format="%(message)s", level=logging.DEBUG if kw.pop('verbose') else logging.WARNING)

    try:
        ui = WordleUI(kw)

        if kw['start_word'] and kw['start_word'] not in ui.dictionary:
            raise click.BadParameter(f"not in dictionary {kw['dict']}", param_hint='START_WORD')

        ui.play()
    except WordleError as e:
        raise click.ClickException(str(e)) from e
    except KeyboardInterrupt:
        pass
