"""かな→ローマ字 変換テーブル

ヘボン式を基本テーブルとし、日本式・訓令式は差分テーブルを上書きして構築する。
カタカナの項目はひらがなの項目からコードポイントのずらしで生成する。
"""

import logging
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

_LOGGER = logging.getLogger(__name__)

KanaTable = Mapping[str, str]


class Scheme(str, Enum):
    """ローマ字の表記法"""
    HEPBURN = "hepburn"
    NIHON = "nihon"
    KUNREI = "kunrei"


# ひらがな→カタカナ変換用オフセット
HIRAGANA_START = ord("ぁ")
HIRAGANA_END = ord("ゖ")
KATAKANA_START = ord("ァ")


def hiragana_to_katakana(text: str) -> str:
    """ひらがなをカタカナに変換"""
    result = []
    for char in text:
        code = ord(char)
        if HIRAGANA_START <= code <= HIRAGANA_END:
            result.append(chr(code - HIRAGANA_START + KATAKANA_START))
        else:
            result.append(char)
    return "".join(result)


# 清音・濁音・半濁音（1文字）
_MONOGRAPHS = {
    # あ行
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    # か行
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    # さ行
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    # た行
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    # な行
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    # は行
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    # ま行
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    # や行
    "や": "ya", "ゆ": "yu", "よ": "yo",
    # ら行
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    # わ行・撥音
    "わ": "wa", "ゐ": "i", "ゑ": "e", "を": "o", "ん": "n",
    # 小書き
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo",
    "ゔ": "bu",
}

# 拗音（2文字）
_DIGRAPHS = {
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "ぢゃ": "ja", "ぢゅ": "ju", "ぢょ": "jo",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
}

# かな以外の記号（長音記号は現状読み飛ばす）
_SYMBOLS = {
    "ー": "",
    "＿": "_",
}

_NIHON_MONOGRAPHS = {
    "し": "si", "ち": "ti", "つ": "tu", "ふ": "hu",
    "じ": "zi", "ぢ": "di", "づ": "du",
    "ゐ": "wi", "ゑ": "we", "を": "wo",
}

_NIHON_DIGRAPHS = {
    "しゃ": "sya", "しゅ": "syu", "しょ": "syo",
    "じゃ": "zya", "じゅ": "zyu", "じょ": "zyo",
    "ちゃ": "tya", "ちゅ": "tyu", "ちょ": "tyo",
    "ぢゃ": "dya", "ぢゅ": "dyu", "ぢょ": "dyo",
}

_KUNREI_MONOGRAPHS = {
    "し": "si", "ち": "ti", "つ": "tu", "ふ": "hu",
    "じ": "zi", "ぢ": "zi",
}

_KUNREI_DIGRAPHS = {
    "しゃ": "sya", "しゅ": "syu", "しょ": "syo",
    "じゃ": "zya", "じゅ": "zyu", "じょ": "zyo",
    "ちゃ": "tya", "ちゅ": "tyu", "ちょ": "tyo",
    "ぢゃ": "zya", "ぢゅ": "zyu", "ぢょ": "zyo",
}


def _with_katakana(hiragana_table: Dict[str, str]) -> Dict[str, str]:
    """ひらがなの各項目に対応するカタカナの項目を追加した新しい辞書を返す"""
    table = dict(hiragana_table)
    for kana, romaji in hiragana_table.items():
        table[hiragana_to_katakana(kana)] = romaji
    return table


MONOGRAPHS: KanaTable = MappingProxyType({**_with_katakana(_MONOGRAPHS), **_SYMBOLS})
DIGRAPHS: KanaTable = MappingProxyType(_with_katakana(_DIGRAPHS))

# 表記法ごとの差分: (拗音, 1文字)
_OVERRIDES = {
    Scheme.HEPBURN: ({}, {}),
    Scheme.NIHON: (_with_katakana(_NIHON_DIGRAPHS), _with_katakana(_NIHON_MONOGRAPHS)),
    Scheme.KUNREI: (_with_katakana(_KUNREI_DIGRAPHS), _with_katakana(_KUNREI_MONOGRAPHS)),
}


def overlay(base: KanaTable, overrides: Mapping[str, str]) -> KanaTable:
    """基本テーブルのコピーに差分を上書きした読み取り専用テーブルを返す

    基本テーブル自体は変更しない。
    """
    table = dict(base)
    table.update(overrides)
    return MappingProxyType(table)


@lru_cache(maxsize=None)
def resolve_tables(scheme: Scheme) -> Tuple[KanaTable, KanaTable]:
    """表記法に対応する (拗音テーブル, 1文字テーブル) を返す

    表記法ごとに一度だけ構築し、以降はキャッシュを返す。

    Args:
        scheme: ローマ字の表記法

    Returns:
        拗音テーブルと1文字テーブルのタプル（いずれも読み取り専用）
    """
    digraph_overrides, monograph_overrides = _OVERRIDES[scheme]
    if not digraph_overrides and not monograph_overrides:
        return DIGRAPHS, MONOGRAPHS

    _LOGGER.debug(
        "Building %s tables (%s digraph, %s monograph overrides)",
        scheme.value,
        len(digraph_overrides),
        len(monograph_overrides),
    )
    return overlay(DIGRAPHS, digraph_overrides), overlay(MONOGRAPHS, monograph_overrides)
