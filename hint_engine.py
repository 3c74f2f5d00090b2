"""
Spelling Bee Hint Engine

Compares the words a player has found against the day's full answer list
and describes what is still missing, one kind of hint at a time:

- How many more words of each length remain?
- How many more words remain that begin with each letter?
- How many answers lie before, after or between the words already found?
- How many more words remain that begin with each two-letter pair?

Every function here is pure: it takes the two word lists and returns
report lines as data. Printing and prompting belong to the caller.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, Iterator, List, Optional, Sequence

END = '**END**'

# Report kinds produced by the gap analysis
INVALID = 'invalid'
FIRST = 'first'
BEFORE = 'before'
LAST = 'last'
AFTER = 'after'
BETWEEN = 'between'


# ============================================================================
# Bucketing criteria
# ============================================================================

def by_length(word: str) -> int:
    return len(word)


def by_first_letter(word: str) -> str:
    return word[:1]


def by_first_two_letters(word: str) -> str:
    # A one-letter word buckets under its single letter
    return word[:2]


# ============================================================================
# Classifier and positional index
# ============================================================================

def frequency(words: Sequence[str], criterion: Callable[[str], Hashable]) -> Dict[Hashable, int]:
    """Count how many non-empty words fall into each bucket of the criterion"""
    counts: Dict[Hashable, int] = {}
    for word in words:
        if not word:
            continue
        key = criterion(word)
        counts[key] = counts.get(key, 0) + 1
    return counts


def word_positions(words: Sequence[str]) -> Dict[str, int]:
    """
    Map each word to the index of its first occurrence in the list

    A repeated word keeps the position of its first appearance. An empty
    list gives an empty mapping.
    """
    positions: Dict[str, int] = {}
    for index, word in enumerate(words):
        if word and word not in positions:
            positions[word] = index
    return positions


# ============================================================================
# Missing-count reporter
# ============================================================================

def report_missing(found_counts: Dict[Hashable, int], answer_counts: Dict[Hashable, int],
                   phrase: str) -> List[str]:
    """
    Describe each bucket where the player is still short of the answers

    Buckets are listed in natural order (lengths numerically, prefixes
    alphabetically). A negative count means the found list holds words
    the answers don't, and is reported as-is.
    """
    missing_list = []

    for tier in sorted(answer_counts):
        missing_words = answer_counts[tier] - found_counts.get(tier, 0)
        if missing_words != 0:
            missing_list.append(f"{phrase}: {tier} -- {missing_words} missing")

    return missing_list


# ============================================================================
# Gap analyzer
# ============================================================================

def word_word(count: int) -> str:
    return 'word' if count == 1 else 'words'


@dataclass
class GapReport:
    """One finding from the positional gap analysis"""
    kind: str
    word: str
    gap: int = 0
    next_word: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind == INVALID:
            return f"***Invalid word in list: '{self.word}' is not a valid answer!"
        if self.kind == FIRST:
            return f"*** {self.word} is the first word ***"
        if self.kind == LAST:
            return f"*** {self.word} is the last word ***"
        if self.kind == BETWEEN:
            return f"{self.gap} {word_word(self.gap)} between {self.word} and {self.next_word}"
        return f"{self.gap} {word_word(self.gap)} {self.kind} {self.word}"

    def __str__(self) -> str:
        return self.message


def analyze(found: Sequence[str], answers: Sequence[str]) -> List[GapReport]:
    """
    Count the unfound answers around each found word

    Walks the found list in order. The first word reports how many answers
    precede it, the last word how many follow it, and each adjacent pair
    how many answers sit between them (zero gaps are left out). If a found
    word, or the word after it, is not an answer, a single invalid report
    is added and the analysis stops there.
    """
    found = [word for word in found if word]
    place_in_found = word_positions(found)
    place_in_answers = word_positions(answers)
    last_answer = len(answers) - 1
    reports: List[GapReport] = []

    for this_word in found:
        position = place_in_found[this_word]
        next_word = found[position + 1] if position + 1 < len(found) else END

        for word in (this_word, next_word):
            if word != END and word not in place_in_answers:
                reports.append(GapReport(INVALID, word))
                return reports

        if position == 0:
            gap = place_in_answers[this_word]
            if gap == 0:
                reports.append(GapReport(FIRST, this_word))
            else:
                reports.append(GapReport(BEFORE, this_word, gap))

        if next_word == END:
            gap = last_answer - place_in_answers[this_word]
            if gap == 0:
                reports.append(GapReport(LAST, this_word))
            else:
                reports.append(GapReport(AFTER, this_word, gap))
        else:
            gap = place_in_answers[next_word] - place_in_answers[this_word] - 1
            if gap != 0:
                reports.append(GapReport(BETWEEN, this_word, gap, next_word))

    return reports


# ============================================================================
# Hint definitions
# ============================================================================

class MissingCountHint:
    """Counts missing words per bucket of a criterion"""

    algorithm = 'missing_count'

    def __init__(self, criterion: Callable[[str], Hashable], phrase: str, title: str = ''):
        if not callable(criterion):
            raise TypeError(f"Hint criterion must be callable, got {criterion!r}")
        self.criterion = criterion
        self.phrase = phrase
        self.title = title or phrase

    def run(self, found: Sequence[str], answers: Sequence[str]) -> List[str]:
        word_counts, answer_counts = (frequency(words, self.criterion) for words in (found, answers))
        return report_missing(word_counts, answer_counts, self.phrase)


class PositionalGapHint:
    """Counts missing answers before, after and between the found words"""

    algorithm = 'positional_gap'

    def __init__(self, title: str = 'Missing words around yours'):
        self.title = title

    def run(self, found: Sequence[str], answers: Sequence[str]) -> List[str]:
        return [report.message for report in analyze(found, answers)]


HINT_TYPES = (
    MissingCountHint(by_length, 'Number of letters', title='Lengths of missing words'),
    MissingCountHint(by_first_letter, 'Words begin with', title='First letters of missing words'),
    PositionalGapHint(),
    MissingCountHint(by_first_two_letters, 'Words begin with', title='First two letters of missing words'),
)


# ============================================================================
# Hint sequencer
# ============================================================================

@dataclass
class HintPhase:
    number: int
    total: int
    title: str
    lines: List[str] = field(default_factory=list)

    @property
    def is_last(self) -> bool:
        return self.number == self.total

    def to_dict(self) -> Dict:
        return {'level': self.number, 'title': self.title, 'lines': self.lines}


class HintSequencer:
    """Runs the hint definitions in order, one phase per hint"""

    def __init__(self, hint_types: Sequence = HINT_TYPES):
        self.hint_types = list(hint_types)

    def __len__(self) -> int:
        return len(self.hint_types)

    def phase(self, level: int, found: Sequence[str], answers: Sequence[str]) -> HintPhase:
        """Compute a single hint; levels count from 1"""
        if not 1 <= level <= len(self.hint_types):
            raise ValueError(f"Hint level must be between 1 and {len(self.hint_types)}")

        hint_type = self.hint_types[level - 1]
        return HintPhase(level, len(self.hint_types), hint_type.title,
                         hint_type.run(found, answers))

    def phases(self, found: Sequence[str], answers: Sequence[str]) -> Iterator[HintPhase]:
        for level in range(1, len(self.hint_types) + 1):
            yield self.phase(level, found, answers)

    def run(self, found: Sequence[str], answers: Sequence[str],
            should_continue: Callable[[], bool], output: Callable[[str], None] = print) -> int:
        """
        Show hints one phase at a time

        After every phase but the last, should_continue() decides whether
        the next one is shown. Returns how many phases were shown.
        """
        shown = 0

        for phase in self.phases(found, answers):
            shown = phase.number
            for line in phase.lines:
                output(line)

            if phase.is_last or not should_continue():
                break

        return shown
