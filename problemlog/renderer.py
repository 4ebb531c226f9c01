# =========================
# renderer.py
# 保存テキスト -> 表示ブロック
# =========================

from dataclasses import dataclass, field
from enum import Enum

BOLD = "**"
CODE = "`"
FENCE = "```"


class State(Enum):
    SCANNING = "scanning"
    IN_BOLD = "in_bold"
    IN_CODE = "in_code"


@dataclass
class Segment:
    kind: str   # text / bold / code
    text: str

    def to_dict(self):
        return {"kind": self.kind, "text": self.text}


@dataclass
class Block:
    kind: str   # heading / spacer / paragraph
    text: str = ""
    segments: list = field(default_factory=list)

    def to_dict(self):
        data = {"kind": self.kind}
        if self.kind == "heading":
            data["text"] = self.text
        elif self.kind == "paragraph":
            data["segments"] = [s.to_dict() for s in self.segments]
        return data


def _emit_text(segments, text):
    if not text:
        return
    if segments and segments[-1].kind == "text":
        segments[-1].text += text
    else:
        segments.append(Segment("text", text))


def parse_inline(text):
    """``**bold**`` と `` `code` `` を含む 1 行を Segment の列に分解する

    閉じマーカーがない場合はマーカーをそのまま文字として出し、
    マーカーの直後から読み直す。例外は出さない。
    """
    segments = []
    state = State.SCANNING
    pos = 0
    start = 0      # 現在のテキスト/スパン内容の開始位置
    opened = ""    # 開いているマーカー

    while True:
        if pos >= len(text):
            if state is State.SCANNING:
                _emit_text(segments, text[start:])
                break
            # 閉じられなかったマーカー
            _emit_text(segments, opened)
            state = State.SCANNING
            pos = start
            continue

        if state is State.SCANNING:
            if text.startswith(BOLD, pos):
                opened, state = BOLD, State.IN_BOLD
            elif text.startswith(CODE, pos):
                opened, state = CODE, State.IN_CODE
            else:
                pos += 1
                continue
            _emit_text(segments, text[start:pos])
            pos += len(opened)
            start = pos
            continue

        if text.startswith(opened, pos):
            kind = "bold" if state is State.IN_BOLD else "code"
            segments.append(Segment(kind, text[start:pos]))
            pos += len(opened)
            start = pos
            state = State.SCANNING
            continue
        pos += 1

    return segments


def render_line(line):
    if line.startswith(BOLD) and line.endswith(BOLD):
        return Block("heading", text=line.replace(BOLD, ""))
    if line.startswith(FENCE) or not line.strip():
        return Block("spacer")
    return Block("paragraph", segments=parse_inline(line))


def render_content(text):
    return [render_line(line) for line in (text or "").split("\n")]
