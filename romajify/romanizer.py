"""かな→ローマ字変換モジュール

ヘボン式・日本式・訓令式のローマ字変換を行う。
拗音→1文字の順でテーブル置換したあと、促音・撥音・長音の規則を順に適用する。
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .kana_tables import Scheme, KanaTable, resolve_tables

_LOGGER = logging.getLogger(__name__)

# 促音
_SOKUON_CH = re.compile(r"[っッ]c")
_SOKUON = re.compile(r"[っッ](.)")

# 撥音（B/M/P の前）
_HATSUON_BMP = re.compile(r"n([bmp])")

# 長音
_HEPBURN_OO = re.compile(r"oo(.+)")
_SHIKI_OU_OO = re.compile(r"ou|oo")


@dataclass(frozen=True)
class RomanizeOptions:
    """変換オプション"""
    upcase: bool = False
    # 伝統式ヘボン（撥音を B/M/P の前で M にする）。ヘボン式のみ有効
    traditional: bool = False


@dataclass
class ConversionRequest:
    """変換リクエスト"""
    text: str
    scheme: Scheme = Scheme.HEPBURN
    options: RomanizeOptions = field(default_factory=RomanizeOptions)


@dataclass
class ConversionResult:
    """変換結果"""
    text: str
    scheme: Scheme
    romaji: str

    def to_dict(self) -> dict:
        """辞書形式に変換"""
        return {
            "text": self.text,
            "scheme": self.scheme.value,
            "romaji": self.romaji,
        }


def replace_all(text: str, table: KanaTable) -> str:
    """テーブルの全キーについて、一致する箇所をすべて置換"""
    for kana, romaji in table.items():
        text = text.replace(kana, romaji)
    return text


def geminate(text: str) -> str:
    """促音（っ）の直後の文字を重ねる"""
    return _SOKUON.sub(r"\1\1", text)


def geminate_hepburn(text: str) -> str:
    """ヘボン式の促音処理（CH の前は T を重ねる: matcha）"""
    return geminate(_SOKUON_CH.sub("tc", text))


def assimilate_nasal(text: str) -> str:
    """撥音（ん）を B/M/P の前で M にする: shinbun → shimbun"""
    return _HATSUON_BMP.sub(r"m\1", text)


def contract_long_vowels_hepburn(text: str) -> str:
    """ヘボン式の長音処理

    おお → O（後続がある場合のみ。末尾の「おお」は OO のまま）
    おう → O
    うう → U
    """
    text = _HEPBURN_OO.sub(r"o\1", text)
    text = text.replace("ou", "o")
    return text.replace("uu", "u")


def contract_long_vowels(text: str) -> str:
    """日本式・訓令式の長音処理: おう/おお → O, うう → U"""
    text = _SHIKI_OU_OO.sub("o", text)
    return text.replace("uu", "u")


def upcase(text: str) -> str:
    """1文字→1文字の単純な大文字化

    upper() が複数文字に展開する文字は、1文字になるタイトルケース（ᾳ → ᾼ）を使い、
    それも展開する場合（ß, ŉ など）は変換しない。
    """
    result = []
    for char in text:
        upper = char.upper()
        if len(upper) != 1:
            title = char.title()
            upper = title if len(title) == 1 else char
        result.append(upper)
    return "".join(result)


class Romanizer:
    """ひらがな/カタカナを指定の表記法でローマ字に変換するクラス"""

    def __init__(self, scheme: Scheme = Scheme.HEPBURN, options: Optional[RomanizeOptions] = None):
        """初期化

        Args:
            scheme: ローマ字の表記法
            options: 変換オプション。Noneの場合はデフォルト
        """
        self.scheme = scheme
        self.options = options or RomanizeOptions()
        self._digraphs, self._monographs = resolve_tables(scheme)
        self._rules = self._build_rules()

    def _build_rules(self) -> List[Callable[[str], str]]:
        """後処理の規則を適用順に並べる"""
        if self.scheme == Scheme.HEPBURN:
            rules = [geminate_hepburn]
            if self.options.traditional:
                rules.append(assimilate_nasal)
            rules.append(contract_long_vowels_hepburn)
        else:
            rules = [geminate, contract_long_vowels]

        if self.options.upcase:
            rules.append(upcase)
        return rules

    def convert(self, text: str) -> str:
        """かなをローマ字に変換

        かな以外の文字はそのまま残す。

        Args:
            text: 変換対象の文字列

        Returns:
            ローマ字に変換した文字列
        """
        if not text:
            return ""

        # 拗音 → 1文字の順で置換
        result = replace_all(text, self._digraphs)
        result = replace_all(result, self._monographs)

        for rule in self._rules:
            result = rule(result)

        _LOGGER.debug("%s: %r -> %r", self.scheme.value, text, result)
        return result


def romanize(
    text: str,
    scheme: Scheme = Scheme.HEPBURN,
    options: Optional[RomanizeOptions] = None,
) -> str:
    """かなをローマ字に変換する"""
    return Romanizer(scheme, options).convert(text)


def convert(request: ConversionRequest) -> ConversionResult:
    """変換リクエストを処理して結果を返す"""
    romaji = romanize(request.text, request.scheme, request.options)
    return ConversionResult(text=request.text, scheme=request.scheme, romaji=romaji)
