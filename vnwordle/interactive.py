import pathlib
import asyncio

import click
import urwid
from blinker import signal

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logging.getLogger('asyncio').setLevel(logging.WARNING)
logger = logging.getLogger()

from . import DICT_URL
from .lookup import find
from .lookupui import make_provider
from .utils import dotdict

class Signal:
    """
    a blinker.signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, *args, **kw):
        self._value = kw.pop('value', None)
        self._signal = signal(*args, **kw)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


class Signals:

    query      = Signal('query',      value='')
    dictionary = Signal('dictionary', value=dict())
    wordlist   = Signal('wordlist',   value=list())

signals = Signals()


class Window(urwid.WidgetWrap):
    def __init__(self, widget, **kw):
        super().__init__(
            urwid.LineBox(widget, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__


class WinQuery(Window):
    def __init__(self):
        label = urwid.Text('query:')
        self.edit = urwid.Edit('', '', multiline=False, align='left', wrap='clip')
        widget = urwid.Columns([
                (8, label),
                ('weight', 1, urwid.AttrMap(self.edit, 'default', 'focused')),
        ], dividechars=1)

        super().__init__(widget)

        urwid.connect_signal(self.edit, 'postchange', self.cb_edit)

    def cb_edit(self, edit, old_text):
        signals.query.value = self.text

    @property
    def text(self):
        return self.edit.get_edit_text()

    @text.setter
    def text(self, text):
        self.edit.set_edit_text(text)
        self.edit.set_edit_pos(len(text)) # end


class WinMatches(Window):

    HINT = '* is a wildcard, space separates syllables\n-abc excludes and +abc requires letters under *\n3-4-aug for syllable lengths'

    def __init__(self, limit=200):
        self.limit = limit
        self.widget = urwid.Text(self.HINT)
        super().__init__(
            urwid.Filler(self.widget, valign='top')
        )

        signals.dictionary.connect(self.cb_dictionary)
        signals.query.connect(self.cb_query)

    def cb_dictionary(self, sender, value):
        logger.info(f"dictionary updated, {len(value)} words")
        self.recalc()

    def cb_query(self, sender, value):
        self.recalc()

    @property
    def text(self):
        text, _ = self.widget.get_text()
        return text

    @text.setter
    def text(self, value):
        self.widget.set_text(value)

    @property
    def dictionary(self):
        return signals.dictionary.value

    @property
    def query(self):
        return signals.query.value

    @property
    def words(self):
        return signals.wordlist.value

    @words.setter
    def words(self, value):
        signals.wordlist.value = value

        if not self.query.strip():
            self.text = self.HINT
        elif len(value) > self.limit:
            self.text = ' '.join(value[:self.limit]) + ' ...'
        else:
            self.text = ' '.join(value)

    def recalc(self):
        logger.debug("recalculating wordlist")

        if self.query.strip():
            self.words = sorted(find(self.dictionary, self.query))
        else:
            self.words = []


class WinCounts(Window):
    def __init__(self):
        font = urwid.Thin3x3Font()
        self.bigtext = urwid.BigText('0', font)
        widget = urwid.Padding(self.bigtext, align='center', width='clip')
        super().__init__(widget, title='Matches', title_align='left')

        signals.wordlist.connect(self.cb_wordlist)

    def cb_wordlist(self, sender, value):
        self.bigtext.set_text(str(len(value)))

    @property
    def text(self):
        text, _ = self.bigtext.get_text()
        return text


class WinLogging(Window):

    def __init__(self):
        self.listbox = urwid.ListBox(urwid.SimpleListWalker([]))
        super().__init__(
            urwid.BoxAdapter(self.listbox, height=3),
            title="Logging", title_align='left', tlcorner='┬', blcorner='┴',
        )


class MainFrame(urwid.Frame):
    def __init__(self, limit=200):
        self.win_query    = WinQuery()
        self.win_matches  = WinMatches(limit)
        self.win_count    = WinCounts()
        self.win_logging  = WinLogging()

        footer = urwid.Columns([
            ("weight", 1, self.win_count),
            ("weight", 2, self.win_logging),
        ], dividechars=-1)

        super().__init__(self.win_matches, header=self.win_query, footer=footer, focus_part='header')


class App:

    def __init__(self, args):
        self.args = dotdict(args)

    def setup(self):

        self.frame = MainFrame(self.args.limit)
        replace_handlers(logger, self.frame.win_logging.listbox)

        # load and send dictionary to listeners
        signals.dictionary.value = make_provider(self.args).load()

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            ('unfocused', 'default', '', '', '', ''),
            ('focused', 'light gray', 'dark blue', '', '#ffd', '#00a'),
        ]

        event_loop = urwid.AsyncioEventLoop(loop=asyncio.new_event_loop())
        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   event_loop=event_loop,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):

        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        return key


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.set_focus(len(self.listbox.body) - 1) # scroll to last line


def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]


@click.command()
@click.option('--url', default=DICT_URL, envvar='VNWORDLE_URL', show_default=True, help="where to fetch the dictionary from")
@click.option('--cache', default=None, envvar='VNWORDLE_CACHE', type=click.Path(dir_okay=False, path_type=pathlib.Path), help="dictionary cache file [default: $TMPDIR/dict_cache.json]")
@click.option('--refresh', is_flag=True, help="ignore the cache and fetch the dictionary again")
@click.option('--limit', default=200, show_default=True, type=click.IntRange(min=1), help="most words to show at once")
@click.pass_context
def cli(ctx, *_, **args):
    """
    interactively narrow down a Vietnamese word, the match list updates as
    you type the query

    \b
    *  for wildcard
    -abc / +abc  exclude / require letters under the wildcards
    esc or f10 to quit
    """

    try:
        app = App(args)
        app.setup()
        app.run()       # blocking call
    except KeyboardInterrupt:
        pass
