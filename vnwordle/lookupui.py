import pathlib

import click

from rich.console import Console
console = Console(highlight=False)
print = console.print

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logger = logging.getLogger()

from . import DICT_URL
from .dictionary import CacheDictionary, UrlDictionary, CachedDictionary
from .lookup import Lookup
from .utils import dotdict

USAGE = """
Hướng dẫn sử dụng
Tất cả các ký tự được nhập phải là chữ cái trong bảng chữ cái tiếng Anh (có thể gõ dấu, dấu sẽ bị bỏ qua).
So khớp từ cụ thể: Sử dụng * cho các chữ cái bất kỳ. Phân tách các âm tiết bằng dấu cách.
Thêm -abc để loại các chữ cái a, b, c và +abc để bắt buộc có các chữ cái đó ở vị trí *.
Ví dụ:
- "viet ***" sẽ khớp với các từ "viet nam", "viet hoa", "viet ngu"
- "*an" sẽ khớp với các từ "can", "san", "tan", "man", v.v.
- "viet *** -oh" sẽ khớp với "viet nam" nhưng không khớp với "viet hoa"
Âm tiết và số lượng chữ cái trong âm tiết: Sử dụng số nguyên cho số lượng chữ cái trong âm tiết và dấu gạch nối để phân tách các âm tiết. Bạn có thể thêm các chữ cái vào cuối để khớp với các từ chứa các chữ cái đó.
Ví dụ:
- "3-4" sẽ khớp với các từ có 2 âm tiết, âm tiết thứ nhất có 3 chữ cái, âm tiết thứ hai có 4 chữ cái.
- "3-4-aug" như trên và từ phải chứa tất cả các chữ cái "a", "u", "g" bất kể số lần xuất hiện, thứ tự và vị trí.

Usage:
All characters entered must be letters of the English alphabet (diacritics are accepted and ignored).
Specific word matching: use * for arbitrary letters. Separate syllables with spaces.
Add -abc to exclude the letters a, b, c and +abc to require them, both only apply to the * positions.

For example:
- "viet ***" will match the words "viet tay", "viet hoa", "viet nam", etc
- "*an" will match the words "can", "san", "tan", "man", etc
- "viet *** -oh" will match "viet nam" but not "viet hoa"

Syllables and letters per syllable: use integers for the number of letters in each syllable and hyphens to separate syllables. You can add letters at the end to match words containing those letters.
For example:
- "3-4-3" will match words with 3 syllables, the first syllable has 3 letters, the second 4 letters and the third 3 letters
- "3-4-aug" will match words with 2 syllables of 3 and 4 letters that contain all the letters "a", "u", "g" regardless of the number of occurrences, order and position

Commands: help, clear-screen, quit
"""

CMD_HELP  = ('help', '!help')
CMD_QUIT  = ('quit', 'exit', '!quit')
CMD_CLEAR = ('clear-screen', 'clear')


def make_provider(args):
    """
    cache first then the network, built from the shared cli options
    """
    return CachedDictionary(
        CacheDictionary(args.cache),
        UrlDictionary(args.url),
        refresh=args.refresh,
    )


class LookupUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args   = args
        self.lookup = Lookup(make_provider(args))

    def show_matches(self, query):
        for word in self.lookup.find(query, sort=self.args.sort):
            print(f"> {word}", markup=False)

    def get_query(self):
        return input(">>> ").strip()

    def handle(self, line):
        """
        run one line of input, returns False when it's time to stop
        """
        command = line.lower()

        if not line:
            return True

        if command in CMD_QUIT:
            return False

        if command in CMD_HELP:
            print(USAGE, markup=False, soft_wrap=True)
        elif command in CMD_CLEAR:
            console.clear()
        else:
            self.show_matches(line)

        return True

    def run(self):
        console.clear()
        print("Type help for usage")

        while True:
            try:
                line = self.get_query()
            except EOFError:
                print()
                return

            if not self.handle(line):
                return


@click.command()
@click.option('--url', default=DICT_URL, envvar='VNWORDLE_URL', show_default=True, help="where to fetch the dictionary from")
@click.option('--cache', default=None, envvar='VNWORDLE_CACHE', type=click.Path(dir_okay=False, path_type=pathlib.Path), help="dictionary cache file [default: $TMPDIR/dict_cache.json]")
@click.option('--refresh', is_flag=True, help="ignore the cache and fetch the dictionary again")
@click.option('--sort/--no-sort', default=True, show_default=True, help="sort matches alphabetically")
@click.option('--verbose', '-v', is_flag=True, help="debug logging")
@click.argument('query', required=False)
@click.pass_context
def cli(ctx, *_, **args):
    """
    find Vietnamese words matching a pattern

    \b
    viet ***        * is any letter, spaces separate syllables
    viet *** -oh    exclude o and h from the * positions
    viet *** +a     require a in the * positions
    3-4-aug         syllable lengths 3 and 4, containing a, u and g

    without QUERY, start a prompt that reads one query per line
    """

    if args['verbose']:
        logger.setLevel(logging.DEBUG)

    try:
        ui = LookupUI(args)

        if args['query']:
            ui.show_matches(args['query'])
        else:
            ui.run()
    except KeyboardInterrupt:
        pass
