import pathlib
import tempfile

DICT_URL = 'https://raw.githubusercontent.com/minhqnd/wordle-vietnamese/main/lib/dictionary_vi.json'
CACHE_FILENAME = 'dict_cache.json'
HTTP_TIMEOUT = 30.0 # seconds

def default_cache_path():
    return pathlib.Path(tempfile.gettempdir()) / CACHE_FILENAME
