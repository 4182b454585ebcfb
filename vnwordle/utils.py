import unicodedata

# đ/Đ are letters in their own right, NFD leaves them alone
LITERAL_SUBSTITUTIONS = str.maketrans({
    'đ': 'd',
    'Đ': 'D',
})

def normalize(text):
    """
    strip diacritics from text, eg. "Đà Nẵng" -> "Da Nang"

    case is left alone so the same function serves both display and
    comparison, callers lower() when they need to compare
    """
    text = text.translate(LITERAL_SUBSTITUTIONS)
    decomposed = unicodedata.normalize('NFD', text)
    stripped = ''.join([
        c for c in decomposed if unicodedata.category(c) != 'Mn'
    ])

    # recompose whatever is left so non latin scripts pass through untouched
    return unicodedata.normalize('NFC', stripped)

def comparison_form(text):
    """
    the form of a word (or query) used for matching:
    no diacritics, lower case, single spaces between syllables
    """
    return ' '.join(normalize(text).lower().split())

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
