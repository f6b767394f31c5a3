"""Template Parser for ability descriptions.

Turns a raw Community Dragon description such as::

    Heal <scaleHealth>@ModifiedHeal@ (%i:scaleAP%)</scaleHealth> and deal
    <magicDamage>@ModifiedDamage@</magicDamage> magic damage.<br>
    <ShowIf.TFT15_BattleAcademia_IsActive>Potential: ...</ShowIf.TFT15_BattleAcademia_IsActive>

into paragraphs of typed segments. Parsing happens in three steps, each run
once over the input:

1. ``tokenize`` scans the string with a single regex and yields typed tokens.
2. ``_build_tree`` folds the tokens into a segment tree, unwrapping formatting
   tags and keeping conditional tags as ``ConditionalBlock`` nodes. Malformed
   markup is repaired here.
3. ``_evaluate`` resolves conditional blocks against the active runtime
   conditions and splits the result into paragraphs.
"""

import html
import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, Optional, Union

from tft_tooltip.data.models.numeric import format_number
from .constants import (
    CONDITIONAL_TAGS,
    LINE_BREAK_TAGS,
    NEGATED_CONDITIONAL_TAGS,
    PARAGRAPH_KEYWORDS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SEGMENTS
# =============================================================================


@dataclass(frozen=True)
class TextSegment:
    """Literal display text."""

    text: str


@dataclass(frozen=True)
class PlaceholderSegment:
    """Reference to an ability variable, e.g. ``@Damage@`` or ``@Slow*100@``."""

    key: str
    multiplier: float = 1.0
    raw: str = ""

    @property
    def source(self) -> str:
        """Placeholder as it would appear in a template."""
        if self.raw:
            return self.raw
        if self.multiplier != 1.0:
            return f"@{self.key}*{format_number(self.multiplier)}@"
        return f"@{self.key}@"


@dataclass(frozen=True)
class LineBreak:
    """Explicit paragraph boundary (``<br>`` or a newline)."""


@dataclass
class ConditionalBlock:
    """Content shown only when a runtime condition holds (or, negated, doesn't)."""

    tag: str
    condition: str
    negated: bool = False
    children: list["Node"] = field(default_factory=list)

    def is_shown(self, active_conditions: frozenset[str]) -> bool:
        return (self.condition in active_conditions) != self.negated


Segment = Union[TextSegment, PlaceholderSegment]
Node = Union[TextSegment, PlaceholderSegment, LineBreak, ConditionalBlock]


@dataclass
class Paragraph:
    """One display paragraph of a parsed template."""

    index: int
    segments: list[Segment] = field(default_factory=list)

    @property
    def placeholders(self) -> list[PlaceholderSegment]:
        return [s for s in self.segments if isinstance(s, PlaceholderSegment)]

    def plain_text(self) -> str:
        """Paragraph text with placeholders left in template form."""
        parts = [s.text if isinstance(s, TextSegment) else s.source for s in self.segments]
        return normalize_whitespace("".join(parts))


@dataclass
class ParsedTemplate:
    """Result of parsing one description."""

    paragraphs: list[Paragraph] = field(default_factory=list)
    conditional_blocks: list[ConditionalBlock] = field(default_factory=list)
    active_conditions: frozenset[str] = frozenset()

    @property
    def placeholders(self) -> list[PlaceholderSegment]:
        """Visible placeholders in order of appearance (duplicates kept)."""
        return [p for paragraph in self.paragraphs for p in paragraph.placeholders]

    @property
    def placeholder_keys(self) -> list[str]:
        """Unique visible placeholder keys in order of first appearance."""
        seen: dict[str, None] = {}
        for placeholder in self.placeholders:
            seen.setdefault(placeholder.key, None)
        return list(seen)

    @property
    def hidden_conditional_blocks(self) -> list[ConditionalBlock]:
        """Top-level conditional blocks omitted from the visible paragraphs."""
        return [b for b in self.conditional_blocks if not b.is_shown(self.active_conditions)]

    def plain_paragraphs(self) -> list[str]:
        return [p.plain_text() for p in self.paragraphs]


# =============================================================================
# TOKENIZER
# =============================================================================


class TokenType(Enum):
    """Token kinds produced by ``tokenize``."""

    TEXT = auto()
    OPEN_TAG = auto()
    CLOSE_TAG = auto()
    LINE_BREAK = auto()
    PLACEHOLDER = auto()
    ICON = auto()
    ENTITY = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    name: str = ""
    attrs: str = ""
    multiplier: float = 1.0


_TOKEN_RE = re.compile(
    r"""
      (?P<icon>\(?%i:[A-Za-z0-9_]+%\)?)
    | (?P<property>@TFTUnitProperty\.:(?P<property_key>[A-Za-z0-9_]+)@?)
    | (?P<placeholder>@(?P<key>[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z0-9_]+)*)
          (?:\*(?P<mult>-?\d+(?:\.\d+)?))?@?)
    | (?P<close></\s*(?P<close_name>[A-Za-z][\w.]*)\s*>)
    | (?P<open><\s*(?P<open_name>[A-Za-z][\w.]*)(?P<attrs>[^<>]*?)(?P<self_close>/)?\s*>)
    | (?P<entity>&(?:[A-Za-z]+|\#\d+);)
    | (?P<newline>\r?\n)
    """,
    re.VERBOSE,
)

_ENABLED_ATTR_RE = re.compile(r"""enabled\s*=\s*["']?(?P<condition>[^"'\s>]+)""", re.IGNORECASE)

_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,!?;:])")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs and drop spaces left before punctuation."""
    collapsed = " ".join(text.split())
    return _SPACE_BEFORE_PUNCT_RE.sub(r"\1", collapsed)


def tokenize(text: str) -> Iterator[Token]:
    """Scan a raw description into typed tokens.

    Anything the scanner does not recognize (including a lone ``<``) is
    emitted as text.
    """
    position = 0
    for match in _TOKEN_RE.finditer(text):
        if match.start() > position:
            yield Token(TokenType.TEXT, text[position:match.start()])
        position = match.end()
        value = match.group(0)

        if match.group("icon"):
            yield Token(TokenType.ICON, value)
        elif match.group("property"):
            yield Token(TokenType.PLACEHOLDER, value, name=match.group("property_key"))
        elif match.group("placeholder"):
            mult = match.group("mult")
            yield Token(
                TokenType.PLACEHOLDER,
                value,
                name=match.group("key"),
                multiplier=float(mult) if mult else 1.0,
            )
        elif match.group("close"):
            yield Token(TokenType.CLOSE_TAG, value, name=match.group("close_name"))
        elif match.group("open"):
            name = match.group("open_name")
            if match.group("self_close") or _tag_base(name) in LINE_BREAK_TAGS:
                if _tag_base(name) in LINE_BREAK_TAGS:
                    yield Token(TokenType.LINE_BREAK, value, name=name)
                # Other self-closing tags carry no display text
                continue
            yield Token(TokenType.OPEN_TAG, value, name=name, attrs=match.group("attrs") or "")
        elif match.group("entity"):
            yield Token(TokenType.ENTITY, value)
        elif match.group("newline"):
            yield Token(TokenType.LINE_BREAK, value)

    if position < len(text):
        yield Token(TokenType.TEXT, text[position:])


def _tag_base(name: str) -> str:
    """``ShowIf.TFT15_X`` -> ``showif``."""
    return name.split(".", 1)[0].lower()


# =============================================================================
# PARSER
# =============================================================================


@dataclass
class _Frame:
    """An open tag awaiting its closing tag."""

    base: str
    children: list[Node] = field(default_factory=list)
    conditional: Optional[ConditionalBlock] = None


class TemplateParser:
    """
    Parse ability descriptions into paragraphs of text and placeholder segments.

    Usage:
        parser = TemplateParser()
        parsed = parser.parse(ability.description)
        for paragraph in parsed.paragraphs:
            ...
    """

    def __init__(self, paragraph_keywords: Optional[Iterable[str]] = None):
        """
        Initialize the parser.

        Args:
            paragraph_keywords: Connective keywords that start a new paragraph
                when they begin a clause. Defaults to PARAGRAPH_KEYWORDS.
        """
        keywords = tuple(paragraph_keywords if paragraph_keywords is not None else PARAGRAPH_KEYWORDS)
        self.paragraph_keywords = keywords
        self._clause_split_re: Optional[re.Pattern] = None
        if keywords:
            # Longest first so "afterwards" wins over "afterward"
            alternation = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
            self._clause_split_re = re.compile(
                rf"(?<=[.!?])\s+(?=(?:{alternation})(?![A-Za-z]))",
                re.IGNORECASE,
            )

    def parse(
        self,
        text: Optional[str],
        active_conditions: Iterable[str] = (),
    ) -> ParsedTemplate:
        """
        Parse a raw description.

        Args:
            text: Raw description; None is treated as empty.
            active_conditions: Conditions that currently hold, e.g.
                ``{"TFT15_BattleAcademia_IsActive"}``.

        Returns:
            ParsedTemplate with visible paragraphs and all conditional blocks.
        """
        active = frozenset(active_conditions)
        tree = self._build_tree(tokenize(text or ""))
        flat = self._evaluate(tree, active)
        paragraphs = self._split_paragraphs(flat)
        blocks = [node for node in tree if isinstance(node, ConditionalBlock)]
        return ParsedTemplate(paragraphs=paragraphs, conditional_blocks=blocks, active_conditions=active)

    def strip_markup(self, text: Optional[str]) -> list[str]:
        """Markup-free paragraphs of a description, placeholders kept as-is."""
        return self.parse(text).plain_paragraphs()

    def flatten_block(self, block: ConditionalBlock, active_conditions: Iterable[str] = ()) -> list[Segment]:
        """Segments of a conditional block's own content on a single line.

        The block's condition is treated as holding; line breaks become spaces.
        """
        active = frozenset(active_conditions) | {block.condition}
        flat = self._evaluate(block.children, active)
        segments: list[Segment] = []
        for node in flat:
            segments.append(TextSegment(" ") if isinstance(node, LineBreak) else node)
        return self._merge_text(segments)

    def _build_tree(self, tokens: Iterable[Token]) -> list[Node]:
        """Fold tokens into a tree, repairing unbalanced tags."""
        root = _Frame(base="")
        stack: list[_Frame] = [root]

        for token in tokens:
            current = stack[-1]
            if token.type == TokenType.TEXT:
                current.children.append(TextSegment(token.value))
            elif token.type == TokenType.ENTITY:
                current.children.append(TextSegment(html.unescape(token.value)))
            elif token.type == TokenType.PLACEHOLDER:
                current.children.append(
                    PlaceholderSegment(key=token.name, multiplier=token.multiplier, raw=token.value)
                )
            elif token.type == TokenType.LINE_BREAK:
                current.children.append(LineBreak())
            elif token.type == TokenType.ICON:
                continue
            elif token.type == TokenType.OPEN_TAG:
                stack.append(self._open_frame(token))
            elif token.type == TokenType.CLOSE_TAG:
                self._close_frame(stack, _tag_base(token.name))

        # Anything still open was never closed: drop the tag, keep the content
        while len(stack) > 1:
            frame = stack.pop()
            logger.debug("Unterminated <%s> tag, keeping its content", frame.base)
            stack[-1].children.extend(frame.children)

        return root.children

    def _open_frame(self, token: Token) -> _Frame:
        base = _tag_base(token.name)
        enabled = _ENABLED_ATTR_RE.search(token.attrs)

        if base in CONDITIONAL_TAGS:
            # <ShowIf.Condition> or <ShowIf Condition>
            parts = token.name.split(".", 1)
            condition = parts[1] if len(parts) > 1 else token.attrs.strip().split(" ")[0]
            block = ConditionalBlock(
                tag=base,
                condition=condition,
                negated=base in NEGATED_CONDITIONAL_TAGS,
            )
            return _Frame(base=base, conditional=block)

        if enabled:
            block = ConditionalBlock(tag=base, condition=enabled.group("condition"))
            return _Frame(base=base, conditional=block)

        return _Frame(base=base)

    def _close_frame(self, stack: list[_Frame], base: str) -> None:
        # Find the nearest open frame this tag closes
        for depth in range(len(stack) - 1, 0, -1):
            if stack[depth].base == base:
                break
        else:
            logger.debug("Dropping stray closing tag </%s>", base)
            return

        # Inner frames were never closed; unwrap them into their parents
        while len(stack) - 1 > depth:
            inner = stack.pop()
            logger.debug("Unterminated <%s> tag inside <%s>", inner.base, base)
            stack[-1].children.extend(inner.children)

        frame = stack.pop()
        parent = stack[-1]
        if frame.conditional is not None:
            frame.conditional.children = frame.children
            parent.children.append(frame.conditional)
        else:
            parent.children.extend(frame.children)

    def _evaluate(self, nodes: list[Node], active: frozenset[str]) -> list[Node]:
        """Resolve conditional blocks; the result holds no ConditionalBlock."""
        result: list[Node] = []
        for node in nodes:
            if isinstance(node, ConditionalBlock):
                if node.is_shown(active):
                    result.extend(self._evaluate(node.children, active))
            else:
                result.append(node)
        return result

    def _merge_text(self, nodes: list) -> list:
        merged: list = []
        for node in nodes:
            if isinstance(node, TextSegment) and merged and isinstance(merged[-1], TextSegment):
                merged[-1] = TextSegment(merged[-1].text + node.text)
            else:
                merged.append(node)
        return merged

    def _split_paragraphs(self, nodes: list[Node]) -> list[Paragraph]:
        paragraphs: list[list[Segment]] = [[]]

        for node in self._merge_text(nodes):
            if isinstance(node, LineBreak):
                paragraphs.append([])
            elif isinstance(node, TextSegment) and self._clause_split_re is not None:
                pieces = self._clause_split_re.split(node.text)
                paragraphs[-1].append(TextSegment(pieces[0]))
                for piece in pieces[1:]:
                    paragraphs.append([TextSegment(piece)])
            else:
                paragraphs[-1].append(node)

        result = []
        for segments in paragraphs:
            paragraph = Paragraph(index=len(result), segments=segments)
            if paragraph.placeholders or paragraph.plain_text():
                result.append(paragraph)
        return result
