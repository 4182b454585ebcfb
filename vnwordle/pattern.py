from .utils import comparison_form

WILDCARD = '*'
EXCLUDE  = '-' # -oh:  o and h are not under any wildcard
REQUIRE  = '+' # +a:   a is under at least one wildcard
SEPARATOR = '-' # legacy dialect, 3-4-aug


class WildcardQuery:
    """
    fixed shape query, eg. "viet *** -oh +a"

    pattern:  tuple of template syllables, each cell a letter or WILDCARD
    required: letters that must show up under a wildcard
    excluded: letters that must not show up under a wildcard
    """

    kind = 'wildcard'

    __slots__ = ('pattern', 'required', 'excluded')

    def __init__(self, pattern=(), required='', excluded=''):
        object.__setattr__(self, 'pattern', tuple(pattern))
        object.__setattr__(self, 'required', frozenset(required))
        object.__setattr__(self, 'excluded', frozenset(excluded))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def text(self):
        return ' '.join(self.pattern)

    def __eq__(self, other):
        if not isinstance(other, WildcardQuery):
            return NotImplemented
        return (self.pattern, self.required, self.excluded) == \
            (other.pattern, other.required, other.excluded)

    def __hash__(self):
        return hash((self.kind, self.pattern, self.required, self.excluded))

    def __repr__(self):
        required = ''.join(sorted(self.required))
        excluded = ''.join(sorted(self.excluded))
        return f"WildcardQuery({self.text!r}, {required=}, {excluded=})"


class SyllableQuery:
    """
    legacy length query, eg. "3-4-aug"

    constraints:  tuple of syllable lengths
    must_contain: letters that must appear anywhere in the word
    """

    kind = 'syllable'

    __slots__ = ('constraints', 'must_contain')

    def __init__(self, constraints=(), must_contain=''):
        object.__setattr__(self, 'constraints', tuple(constraints))
        object.__setattr__(self, 'must_contain', frozenset(must_contain))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, SyllableQuery):
            return NotImplemented
        return (self.constraints, self.must_contain) == \
            (other.constraints, other.must_contain)

    def __hash__(self):
        return hash((self.kind, self.constraints, self.must_contain))

    def __repr__(self):
        must_contain = ''.join(sorted(self.must_contain))
        return f"SyllableQuery({self.constraints}, {must_contain=})"


def is_legacy(query):
    """
    a single token containing a hyphen, eg. 3-4 or 3-4-aug

    "-oh" on its own is an exclude token, not a length query
    """
    return all([
        SEPARATOR in query,
        len(query.split()) == 1,
        not query.startswith((EXCLUDE, REQUIRE)),
    ])

def parse_wildcard(query):
    pattern  = []
    required = ''
    excluded = ''

    for token in query.split():
        if token.startswith(EXCLUDE):
            excluded += token[1:]
        elif token.startswith(REQUIRE):
            required += token[1:]
        else:
            pattern.append(token)

    return WildcardQuery(pattern, required, excluded)

def parse_syllables(query):
    constraints  = []
    must_contain = ''

    for part in query.split(SEPARATOR):
        # anything that isn't a plain number is letters to look for, never an error
        if part.isascii() and part.isdigit():
            constraints.append(int(part))
        else:
            must_contain += part

    return SyllableQuery(constraints, must_contain)

def parse(raw_query):
    """
    turn what the user typed into a WildcardQuery or SyllableQuery
    """
    query = comparison_form(raw_query)

    if is_legacy(query):
        return parse_syllables(query)

    return parse_wildcard(query)
