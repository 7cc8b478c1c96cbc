# What it does: Expands a printf-like format string (e.g. "%n:%b") using a RepoState
# How it does: Scans the format one character at a time with a two-state automaton. In NORMAL, characters are copied and '%' switches to SAW_PERCENT. In SAW_PERCENT, the next character is looked up in ESCAPES; unknown escapes emit the character itself and drop the '%'. A lone '%' at the end of input emits nothing
# What data structure it uses: Finite state machine; Dictionary (escape character -> field accessor); List of fragments joined once at the end

from enum import Enum


class _Scan(Enum):
    NORMAL = 0
    SAW_PERCENT = 1


ESCAPES = {
    'n': lambda state: state.name,
    'b': lambda state: state.branch,
    'r': lambda state: state.revision,
    'm': lambda state: '+' if state.modified else '',
}

# Shown in the usage text, keep in sync with ESCAPES
FORMAT_HELP = [
    ('%n', 'show vcs name'),
    ('%b', 'show branch'),
    ('%r', 'show revision'),
    ('%m', 'show modified'),
]

def render(fmt, state): # Returns the expanded format, or '' when no repository is available
    if not state.available:
        return ''

    out = []
    scan = _Scan.NORMAL
    for char in fmt:
        if scan is _Scan.NORMAL:
            if char == '%':
                scan = _Scan.SAW_PERCENT
            else:
                out.append(char)
            continue

        expand = ESCAPES.get(char)
        out.append(expand(state) if expand else char)
        scan = _Scan.NORMAL

    return ''.join(out)
