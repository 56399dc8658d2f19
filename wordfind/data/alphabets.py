"""Letter pools used to fill the blank cells of a finished puzzle."""

from __future__ import annotations

from typing import Dict, Protocol

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

# a-z without j, k, q, x and z
DEFAULT_LETTERS = "abcdefghijklmnoprstuvwy"

LETTER_SETS: Dict[str, str] = {
    "EN": DEFAULT_LETTERS,
    "ES": DEFAULT_LETTERS,
    "FR": DEFAULT_LETTERS + "éàèùâêîôûçëïü",
    "IT": DEFAULT_LETTERS + "àèéìòóù",
    "DE": DEFAULT_LETTERS + "äöüß",
    "JA": (
        "アカサタナイキシチニウクスツヌエケセテネオコソトノハマヤラワヒミリヰフムユルンヘメレヱホモヨロヲ"
        "ガザダバパギジヂビピグズヅブプゲゼデベペゴゾドボポ"
    ),
    "ZH": (
        "安吧爸八百北不大岛的弟地东都对多儿二方港哥个关贵国过海好很会家见叫姐京九可老李零六吗妈么没美妹们明名"
        "哪那南你您朋七起千去人认日三上谁什生师识十是四他她台天湾万王我五西息系先香想小谢姓休学也一亿英友月再张"
        "这中字"
    ),
    "HI": (
        "अआएईऍऎऐइओऑऒऊऔउबभचछडढफफ़गघग़हजझकखख़लळऌऴॡमनङञणऩॐपक़रऋॠऱसशषटतठदथधड़ढ़वयय़ज़"
    ),
    "ID": DEFAULT_LETTERS,
    "NL": DEFAULT_LETTERS + "áéíóúàèëïöüĳ",
    "PL": DEFAULT_LETTERS + "ąćęłńóśżź",
    "PT": DEFAULT_LETTERS + "àáâãçéêíóôõú",
    "RU": "абвгдеёжзийклмнопрстуфхцчшщъыьэюя",
    "KO": (
        "ㄱㄴㄷㄹㅁㅂㅅㅇㅈㅊㅋㅌㅍㅎㅏㅓㅗㅜㅡㅣㅑㅕㅛㅠㄲㄸㅃㅆㅉㄳㄵㄶㄺㄻㄼㄽㄾㄿㅀㅄㅐㅒㅔㅖㅢㅘㅙㅚㅝㅞㅟ"
    ),
}


class AlphabetProvider(Protocol):
    """Callable supplying the blank-fill letters for a language code."""

    def __call__(self, language_code: str) -> str:
        ...


def letters_for(language_code: str) -> str:
    """Return the fill letters for an ISO 639-1 code, defaulting to English."""

    letters = LETTER_SETS.get((language_code or "").upper())
    if letters is None:
        LOGGER.warning(
            "Language '%s' not recognized, falling back to English", language_code
        )
        return DEFAULT_LETTERS
    return letters


__all__ = ["AlphabetProvider", "DEFAULT_LETTERS", "LETTER_SETS", "letters_for"]
