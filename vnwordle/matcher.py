from .pattern import WILDCARD, WildcardQuery, SyllableQuery

def match_wildcard(query, word):
    """
    every syllable must have the same shape as its template, literal cells
    must be equal and the letters under the wildcards are collected so
    required/excluded letters are only checked where the user didn't
    already know the letter
    """
    syllables = word.split()

    if len(syllables) != len(query.pattern):
        return False

    wild = ''

    for template, syllable in zip(query.pattern, syllables):
        if len(template) != len(syllable):
            return False

        for cell, c in zip(template, syllable):
            if cell == WILDCARD:
                wild += c
            elif cell != c:
                return False

    return all([
        all([c in wild for c in query.required]),
        not any([c in wild for c in query.excluded]),
    ])

def match_syllables(query, word):
    """
    syllable lengths must line up and the must_contain letters can be
    anywhere in the word, there is no exclude list in this form
    """
    syllables = word.split()

    if len(syllables) != len(query.constraints):
        return False

    for length, syllable in zip(query.constraints, syllables):
        if len(syllable) != length:
            return False

    return all([c in word for c in query.must_contain])

MATCHERS = {
    WildcardQuery.kind: match_wildcard,
    SyllableQuery.kind: match_syllables,
}

def matches(query, word):
    """
    does the normalized word satisfy the parsed query
    """
    try:
        matcher = MATCHERS[query.kind]
    except (AttributeError, KeyError):
        raise TypeError(f"unknown query type: {query!r}") from None

    return matcher(query, word)
