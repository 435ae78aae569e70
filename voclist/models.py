"""
Data structures exchanged with vocabulary.com and the correction engine.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class WordEntry:
    """A word the user wants in a list, with their own annotations."""

    word: str
    description: Optional[str] = None
    example: Optional[str] = None
    sentence: Optional[str] = None
    location: Optional[str] = None  # URL the word was found at
    title: Optional[str] = None  # Title of the source the example comes from
    synset_id: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert to dictionary, leaving out unset fields."""
        result = {"word": self.word}
        for key, value in (
            ("description", self.description),
            ("example", self.example),
            ("sentence", self.sentence),
            ("location", self.location),
            ("title", self.title),
            ("synsetId", self.synset_id),
        ):
            if value:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict) -> 'WordEntry':
        """Create from dictionary."""
        synset_id = data.get('synsetId') or data.get('synsetid') or data.get('synset_id')
        return cls(
            word=data.get('word', ''),
            description=data.get('description'),
            example=data.get('example'),
            sentence=data.get('sentence'),
            location=data.get('location'),
            title=data.get('title'),
            synset_id=str(synset_id) if synset_id else None,
        )


@dataclass(frozen=True)
class CanonicalWord:
    """A word as recognized by vocabulary.com's grabber."""

    word: str
    definition: str = ""
    difficulty: Optional[float] = None
    frequency: Optional[float] = None

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "definition": self.definition,
            "difficulty": self.difficulty,
            "frequency": self.frequency,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'CanonicalWord':
        """Create from a grab.json word: {"word", "def", "diff", "freq"}."""
        return cls(
            word=data.get('word', ''),
            definition=data.get('def', data.get('definition', '')) or '',
            difficulty=data.get('diff', data.get('difficulty')),
            frequency=data.get('freq', data.get('frequency')),
        )


@dataclass
class GrabResult:
    """
    Words extracted by the vocab grabber from a piece of text.

    Not-learnable words are also present in ``words``.
    """

    words: List[CanonicalWord] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)
    not_learnable: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> 'GrabResult':
        return cls(
            words=[CanonicalWord.from_dict(w) for w in data.get('words') or []],
            not_found=list(data.get('notfound') or []),
            not_learnable=list(data.get('notlearnable') or []),
        )

    def to_dict(self) -> Dict:
        return {
            "words": [w.to_dict() for w in self.words],
            "notFound": list(self.not_found),
            "notLearnable": list(self.not_learnable),
        }


@dataclass(frozen=True)
class Suggestion:
    """One autocomplete candidate: a single meaning of a word."""

    word: str
    definition: str = ""
    frequency: float = 0.0
    language: str = "en"
    meaning_id: str = ""  # synset id of this meaning

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "definition": self.definition,
            "frequency": self.frequency,
            "language": self.language,
            "meaningId": self.meaning_id,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Suggestion':
        return cls(
            word=data.get('word', ''),
            definition=data.get('definition', ''),
            frequency=data.get('frequency', 0.0),
            language=data.get('language', 'en'),
            meaning_id=data.get('meaningId', ''),
        )


@dataclass
class MergedWord:
    """Canonical word carrying the user's annotations."""

    word: str
    description: Optional[str] = None
    example: Optional[str] = None

    def to_entry(self) -> WordEntry:
        return WordEntry(word=self.word, description=self.description, example=self.example)

    def to_dict(self) -> Dict:
        result = {"word": self.word}
        if self.description:
            result["description"] = self.description
        if self.example:
            result["example"] = self.example
        return result


@dataclass
class ReconciliationResult:
    """Outcome of aligning a word list with the service's vocabulary."""

    words: List[MergedWord] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)
    not_learnable: List[str] = field(default_factory=list)
    corrected: List[WordEntry] = field(default_factory=list)  # original entries

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "words": [w.to_dict() for w in self.words],
            "notFound": list(self.not_found),
            "notLearnable": list(self.not_learnable),
            "corrected": [e.to_dict() for e in self.corrected],
        }


@dataclass
class WordProgress:
    """Learning progress of a word for the logged-in user."""

    word: str
    progress: float = 0.0
    priority: int = 0
    lists: List[Dict[str, Any]] = field(default_factory=list)
    pos: Any = None
    difficulty: Optional[float] = None
    definition: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> 'WordProgress':
        """Create from a progress.json response."""
        # dif is the user's own difficulty, diff the global one
        return cls(
            word=data.get('word', ''),
            progress=data.get('prg', 0.0),
            priority=data.get('pri', 0),
            lists=data.get('ld') or [],
            pos=data.get('pos'),
            difficulty=data.get('dif') or data.get('diff'),
            definition=data.get('def', ''),
        )

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "progress": self.progress,
            "priority": self.priority,
            "lists": self.lists,
            "pos": self.pos,
            "diff": self.difficulty,
            "def": self.definition,
        }
