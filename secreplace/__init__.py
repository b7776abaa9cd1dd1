"""
# Section Replace

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Replace sections of text surrounded by known opening and closing markers.
Sections may be nested; the innermost section is always replaced first,
and `replace_all` keeps replacing until no section remains.

````
>>> from secreplace import replace_all
>>> replace_all('(_foo (_bar_) (_baz (_qux_)_)_)', '(_', '_)', lambda interior: interior)
ReplaceResult(string='foo bar baz qux', changed=True, error=None, kind=None)
````
"""

from secreplace._version import __version__
from secreplace.exceptions import ErrorKind, SectionReplaceException
from secreplace.sections import LocateResult, ReplaceResult, locate, replace_all, replace_one
