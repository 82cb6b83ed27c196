from artlang.reader.cursor import Cursor
from artlang.reader.parser import parse
