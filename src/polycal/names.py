"""
polycal.names
-------------
Static name tables: month names (full and abbreviated), weekday names, time
tier names and calendar descriptions, keyed by calendar.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .core.types import Calendar, TierNames

_GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_GREGORIAN_MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_CHINESE_MONTHS = ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一", "十二")

CHINESE_LEAP_PREFIX = "闰"

MONTH_NAMES: Mapping[Calendar, Tuple[str, ...]] = MappingProxyType({
    Calendar.GREGORIAN: _GREGORIAN_MONTHS,
    Calendar.JULIAN: _GREGORIAN_MONTHS,
    Calendar.ISLAMIC: (
        "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani", "Jumada al-awwal", "Jumada al-thani",
        "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
    ),
    Calendar.HEBREW: (
        "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
        "Tishrei", "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar", "Adar II",
    ),
    Calendar.PERSIAN: (
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    Calendar.CHINESE: _CHINESE_MONTHS,
    Calendar.ETHIOPIAN: (
        "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
        "Miazia", "Genbot", "Sene", "Hamle", "Nehase", "Pagume",
    ),
    Calendar.COPTIC: (
        "Tout", "Baba", "Hator", "Koiak", "Tobi", "Meshir", "Paremhat",
        "Paremoude", "Pashons", "Paoni", "Epip", "Mesori", "Pi Kogi Enavot",
    ),
    Calendar.INDIAN_SAKA: (
        "Chaitra", "Vaisakha", "Jyeshtha", "Ashadha", "Shravana", "Bhadra",
        "Ashwin", "Kartika", "Agrahayana", "Pausha", "Magha", "Phalguna",
    ),
    Calendar.BAHAI: (
        "Bahá", "Jalál", "Jamál", "ʻAẓamat", "Núr", "Raḥmat", "Kalimát", "Kamál", "Asmáʼ", "ʻIzzat",
        "Mashíyyat", "ʻIlm", "Qudrat", "Qawl", "Masáʼil", "Sharaf", "Sulṭán", "Mulk", "Ayyám-i-Há", "ʻAláʼ",
    ),
    Calendar.THAI_BUDDHIST: (
        "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
        "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
    ),
    Calendar.MAYAN_TZOLKIN: (
        "Imix", "Ik'", "Ak'b'al", "K'an", "Chikchan", "Kimi", "Manik'", "Lamat", "Muluk", "Ok",
        "Chuwen", "Eb'", "B'en", "Ix", "Men", "K'ib'", "Kab'an", "Etz'nab'", "Kawak", "Ajaw",
    ),
    Calendar.MAYAN_HAAB: (
        "Pop", "Wo'", "Sip", "Sotz'", "Sek", "Xul", "Yaxk'in", "Mol", "Ch'en", "Yax",
        "Sak'", "Keh", "Mak", "K'ank'in", "Muwan", "Pax", "K'ayab'", "Kumk'u", "Wayeb'",
    ),
    Calendar.MAYAN_LONGCOUNT: (),
    Calendar.CHEROKEE: (
        "Cold Moon", "Bony Moon", "Windy Moon", "Flower Moon", "Planting Moon", "Green Corn Moon",
        "Ripe Corn Moon", "Fruit Moon", "Nut Moon", "Harvest Moon", "Trading Moon", "Snow Moon",
    ),
    Calendar.IROQUOIS: (
        "First Moon", "Second Moon", "Third Moon", "Fourth Moon", "Fifth Moon", "Sixth Moon", "Seventh Moon",
        "Eighth Moon", "Ninth Moon", "Tenth Moon", "Eleventh Moon", "Twelfth Moon", "Thirteenth Moon",
    ),
    Calendar.AZTEC_XIUHPOHUALLI: (
        "Atlcahualo", "Tlacaxipehualiztli", "Tozoztontli", "Huey Tozoztli", "Toxcatl", "Etzalcualiztli",
        "Tecuilhuitontli", "Huey Tecuilhuitl", "Tlaxochimaco", "Xocotlhuetzi", "Ochpaniztli", "Teotleco",
        "Tepeilhuitl", "Quecholli", "Panquetzaliztli", "Atemoztli", "Tititl", "Izcalli", "Nemontemi",
    ),
})

MONTH_NAMES_SHORT: Mapping[Calendar, Tuple[str, ...]] = MappingProxyType({
    Calendar.GREGORIAN: _GREGORIAN_MONTHS_SHORT,
    Calendar.JULIAN: _GREGORIAN_MONTHS_SHORT,
    Calendar.ISLAMIC: ("Muh", "Saf", "Rab I", "Rab II", "Jum I", "Jum II", "Raj", "Sha'", "Ram", "Shaw", "Dhu Q", "Dhu H"),
    Calendar.HEBREW: ("Nis", "Iyy", "Siv", "Tam", "Av", "Elu", "Tis", "Che", "Kis", "Tev", "She", "Ada", "Ad2"),
    Calendar.PERSIAN: ("Far", "Ord", "Kho", "Tir", "Mor", "Sha", "Meh", "Aba", "Aza", "Dey", "Bah", "Esf"),
    Calendar.CHINESE: _CHINESE_MONTHS,
    Calendar.ETHIOPIAN: ("Mes", "Tik", "Hid", "Tah", "Tir", "Yek", "Meg", "Mia", "Gen", "Sen", "Ham", "Neh", "Pag"),
    Calendar.COPTIC: ("Tou", "Bab", "Hat", "Koi", "Tob", "Mes", "Par", "Par", "Pas", "Pao", "Epi", "Mes", "PiK"),
    Calendar.INDIAN_SAKA: ("Cha", "Vai", "Jye", "Ash", "Shr", "Bha", "Ash", "Kar", "Agr", "Pau", "Mag", "Pha"),
    Calendar.BAHAI: (
        "Bah", "Jal", "Jam", "Aẓa", "Núr", "Raḥ", "Kal", "Kam", "Asm", "Izz",
        "Mas", "Ilm", "Qud", "Qaw", "Mas", "Sha", "Sul", "Mul", "Ayy", "Ala",
    ),
    Calendar.THAI_BUDDHIST: ("ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.", "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค."),
    Calendar.MAYAN_TZOLKIN: (
        "Imi", "Ik", "Ak'", "K'an", "Chi", "Kim", "Man", "Lam", "Mul", "Ok",
        "Chu", "Eb", "B'en", "Ix", "Men", "K'ib", "Kab", "Etz", "Kaw", "Aja",
    ),
    Calendar.MAYAN_HAAB: (
        "Pop", "Wo", "Sip", "Sot", "Sek", "Xul", "Yax", "Mol", "Ch'e", "Yax",
        "Sak", "Keh", "Mak", "K'an", "Muw", "Pax", "K'ay", "Kum", "Way",
    ),
    Calendar.MAYAN_LONGCOUNT: (),
    Calendar.CHEROKEE: (
        "Cold", "Bony", "Windy", "Flower", "Planting", "Green Corn",
        "Ripe Corn", "Fruit", "Nut", "Harvest", "Trading", "Snow",
    ),
    Calendar.IROQUOIS: (
        "1st Moon", "2nd Moon", "3rd Moon", "4th Moon", "5th Moon", "6th Moon", "7th Moon",
        "8th Moon", "9th Moon", "10th Moon", "11th Moon", "12th Moon", "13th Moon",
    ),
    Calendar.AZTEC_XIUHPOHUALLI: (
        "Atlc", "Tlac", "Toz", "Huey", "Tox", "Etz", "Tec", "Huey T", "Tlax", "Xoc",
        "Och", "Teot", "Tepe", "Que", "Pan", "Atem", "Titi", "Izca", "Nemo",
    ),
})

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DAY_NAMES_SHORT = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def month_name(calendar: Calendar, month: int, *, short: bool = False, leap_year: bool = False) -> str:
    """
    Display name of a month number, falling back to the number itself.

    Chinese leap months (encoded 13..24) get the 闰 prefix. In a Hebrew leap
    year month 12 is Adar I.
    """
    table = (MONTH_NAMES_SHORT if short else MONTH_NAMES)[calendar]
    if calendar is Calendar.CHINESE and 13 <= month <= 24:
        return CHINESE_LEAP_PREFIX + table[month - 13]
    if calendar is Calendar.HEBREW and month == 12 and leap_year:
        return "Ad1" if short else "Adar I"
    if 1 <= month <= len(table):
        return table[month - 1]
    return str(month)


# ---------------------------------------------------------------------------
# Tier names
# ---------------------------------------------------------------------------

_GENERIC = TierNames("Decade", "Year", "Month", "Week", "Day")
_MOONS = TierNames("Decade", "Year", "Moon", "Week", "Day")

TIER_NAMES: Mapping[Calendar, TierNames] = MappingProxyType({
    Calendar.GREGORIAN: _GENERIC,
    Calendar.JULIAN: _GENERIC,
    Calendar.ISLAMIC: TierNames("عقد", "سنة", "شهر", "أسبوع", "يوم"),
    Calendar.HEBREW: TierNames("עשור", "שנה", "חודש", "שבוע", "יום"),
    Calendar.PERSIAN: TierNames("دهه", "سال", "ماه", "هفته", "روز"),
    Calendar.CHINESE: TierNames("十年", "年", "月", "星期", "日"),
    Calendar.ETHIOPIAN: TierNames("Decade", "ዓመት", "ወር", "ሳምንት", "ቀን"),
    Calendar.COPTIC: TierNames("Decade", "ⲣⲟⲙⲡⲉ", "ⲉⲡⲁⲅⲟⲙⲉⲛⲁ", "ⲥⲁⲃⲃⲁⲧⲟⲛ", "ⲉϩⲟⲟⲩ"),
    Calendar.INDIAN_SAKA: TierNames("दशक", "वर्ष", "मास", "सप्ताह", "दिन"),
    Calendar.BAHAI: TierNames("Váḥid", "Year", "Month", "Week", "Day"),
    Calendar.THAI_BUDDHIST: TierNames("ทศวรรษ", "ปี", "เดือน", "สัปดาห์", "วัน"),
    Calendar.MAYAN_TZOLKIN: TierNames("K'atun", "Tun", "Uinal", "Trecena", "Kin"),
    Calendar.MAYAN_HAAB: TierNames("K'atun", "Haab'", "Uinal", "Period", "Kin"),
    Calendar.MAYAN_LONGCOUNT: TierNames("K'atun", "Tun", "Uinal", "Period", "Kin"),
    Calendar.CHEROKEE: _MOONS,
    Calendar.IROQUOIS: _MOONS,
    Calendar.AZTEC_XIUHPOHUALLI: TierNames("Xiuhmolpilli", "Xiuhpohualli", "Veintena", "Period", "Tonalli"),
})


# ---------------------------------------------------------------------------
# Calendar descriptions: (name, native name, kind, months, days in year, era)
# ---------------------------------------------------------------------------

CALENDAR_TABLE: Dict[Calendar, tuple] = {
    Calendar.GREGORIAN: ("Gregorian", "Gregorian", "solar", 12, 365, "CE"),
    Calendar.JULIAN: ("Julian", "Julian", "solar", 12, 365, "CE"),
    Calendar.ISLAMIC: ("Islamic (Hijri)", "التقويم الهجري", "lunar", 12, 354, "AH"),
    Calendar.HEBREW: ("Hebrew (Jewish)", "הלוח העברי", "lunisolar", 12, 354, "AM"),
    Calendar.PERSIAN: ("Persian (Jalali)", "گاهشماری جلالی", "solar", 12, 365, "SH"),
    Calendar.CHINESE: ("Chinese", "农历", "lunisolar", 12, 354, "CE"),
    Calendar.ETHIOPIAN: ("Ethiopian", "የኢትዮጵያ ዘመን አቆጣጠር", "solar", 13, 365, "EE"),
    Calendar.COPTIC: ("Coptic", "ⲛⲓⲙⲉⲧⲟⲩⲛⲓⲙⲓⲛⲓ", "solar", 13, 365, "AM"),
    Calendar.INDIAN_SAKA: ("Indian National (Saka)", "शक संवत", "solar", 12, 365, "Saka"),
    Calendar.BAHAI: ("Baháʼí", "Badíʻ", "solar", 20, 365, "BE"),
    Calendar.THAI_BUDDHIST: ("Thai Buddhist", "พุทธศักราช", "solar", 12, 365, "BE"),
    Calendar.MAYAN_TZOLKIN: ("Mayan Tzolk'in", "Tzolk'in", "other", 20, 260, ""),
    Calendar.MAYAN_HAAB: ("Mayan Haab'", "Haab'", "solar", 19, 365, ""),
    Calendar.MAYAN_LONGCOUNT: ("Mayan Long Count", "Long Count", "other", 20, 360, ""),
    Calendar.CHEROKEE: ("Cherokee", "ᎠᏂᏴᏫᏯᎢ", "lunisolar", 12, 365, "CE"),
    Calendar.IROQUOIS: ("Iroquois (Haudenosaunee)", "Haudenosaunee", "lunisolar", 13, 365, "CE"),
    Calendar.AZTEC_XIUHPOHUALLI: ("Aztec Xiuhpohualli", "Xiuhpohualli", "solar", 19, 365, ""),
}


def era_name(calendar: Calendar) -> str:
    return CALENDAR_TABLE[calendar][5]
