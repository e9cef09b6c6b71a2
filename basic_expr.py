from basic_vars import letter_index

# =========================
# Cursor over one statement's text
# =========================
BLANKS = ' \t'


class Cursor:
    def __init__(self, text, pos=0):
        self.text = text
        self.pos = pos

    def peek(self, ahead=0):
        i = self.pos + ahead
        return self.text[i] if i < len(self.text) else ''

    def at_end(self):
        return self.pos >= len(self.text)

    def skip_blanks(self):
        while self.peek() and self.peek() in BLANKS:
            self.pos += 1

    def startswith(self, word):
        return self.text.startswith(word, self.pos)

    def match(self, ch):
        """Consume `ch` if it is the next character (no blank skipping)."""
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def number(self):
        """Digits at the cursor (after blanks) -> int, or None without moving."""
        self.skip_blanks()
        start = self.pos
        while '0' <= self.peek() <= '9':
            self.pos += 1
        if self.pos == start:
            return None
        return int(self.text[start:self.pos])

    def variable(self):
        """Single letter A-Z -> slot 0..25, or -1 without moving."""
        self.skip_blanks()
        slot = letter_index(self.peek())
        if slot >= 0:
            self.pos += 1
        return slot

    def __repr__(self):
        return f"Cursor({self.text[:self.pos]!r}|{self.text[self.pos:]!r})"


def wrap32(v):
    """Two's-complement wrap to a signed 32-bit int."""
    return (v + 0x80000000) % 0x100000000 - 0x80000000


def int_div(a, b):
    # truncate toward zero; x/0 is 0
    if b == 0:
        return 0
    q = abs(a) // abs(b)
    return wrap32(q if (a < 0) == (b < 0) else -q)


# =========================
# Evaluator (recursive descent, no AST)
# =========================
# two-char operators first so '<>' is never read as '<' + '>'
RELOPS = (
    ('<>', lambda a, b: a != b),
    ('<=', lambda a, b: a <= b),
    ('>=', lambda a, b: a >= b),
    ('<',  lambda a, b: a < b),
    ('>',  lambda a, b: a > b),
)


class Evaluator:
    def __init__(self, store):
        self.store = store

    # expr := term (('+' | '-') term)*
    def expr(self, cur):
        v = self.term(cur)
        cur.skip_blanks()
        while True:
            if cur.match('+'):
                v = wrap32(v + self.term(cur))
            elif cur.match('-'):
                v = wrap32(v - self.term(cur))
            else:
                break
            cur.skip_blanks()
        return v

    # term := primary (('*' | '/') primary)*
    def term(self, cur):
        v = self.primary(cur)
        cur.skip_blanks()
        while True:
            if cur.match('*'):
                v = wrap32(v * self.primary(cur))
            elif cur.match('/'):
                v = int_div(v, self.primary(cur))
            else:
                break
            cur.skip_blanks()
        return v

    def primary(self, cur):
        cur.skip_blanks()
        if cur.match('('):
            v = self.expr(cur)
            cur.skip_blanks()
            cur.match(')')
            return v
        if cur.match('-'):
            return wrap32(-self.primary(cur))
        n = cur.number()
        if n is not None:
            return wrap32(n)
        slot = cur.variable()
        if slot < 0:
            return 0
        cur.skip_blanks()
        if cur.match('('):
            idx = self.subscript(cur)
            return self.store.read(slot, idx)
        return self.store.get(slot)

    def subscript(self, cur):
        """'(' already consumed: expr then an optional ')'."""
        idx = self.expr(cur)
        cur.skip_blanks()
        cur.match(')')
        return idx

    def relop(self, cur):
        cur.skip_blanks()
        if cur.peek() == '=' and cur.peek(1) != '=':
            cur.pos += 1
            return lambda a, b: a == b
        for op, fn in RELOPS:
            if cur.startswith(op):
                cur.pos += len(op)
                return fn
        return None

    def condition(self, cur):
        left = self.expr(cur)
        op = self.relop(cur)
        if op is None:
            return False
        right = self.expr(cur)
        return op(left, right)


def evaluate(text, store):
    """Convenience: value of the expression at the start of `text`."""
    return Evaluator(store).expr(Cursor(text))
