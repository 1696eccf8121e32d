import pathlib
path = pathlib.Path(__file__).parent.parent / 'tests' / 'fixtures'

from multispell.languages import load_dictionaries
from multispell.user import User

loaded = load_dictionaries(['en-au', 'de-de'], path)
user = User(loaded.dicts, loaded.prefs, {'kablam': []})

spelling = user.check('A colorful text with kablam in it', 'en')

print(spelling.misspelt_strings)
print(spelling.suggestions)
print(user.speller('de-de').correct('Zeiten'))
