# ═════════════════════════════════════════════════════════════════════════════════
# ROMANIZED SYLLABLE DATA
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static lookup tables used by the style checkers:
# 1. PINYIN_SYLLABLES: every toneless Hanyu Pinyin syllable a label may be built from
# 2. INITIAL_CONSONANT_TOKENS: initials stripped by the pure-initial-consonant check
# 3. STYLE_LABELS: per-locale display names for each style
# 4. ERROR_MESSAGES: per-locale text for each failure reason
#
# All tables are immutable and built once at import time.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# "lv", "lue" and "nue" are the keyboard spellings of lü, lüe and nüe.
PINYIN_SYLLABLES = frozenset(
    {
        "a", "ai", "an", "ang", "ao",
        "ba", "bai", "ban", "bang", "bao", "bei", "ben", "beng", "bi", "bian", "biao", "bie", "bin",
        "bing", "bo", "bu",
        "ca", "cai", "can", "cang", "cao", "ce", "cen", "ceng", "cha", "chai", "chan", "chang", "chao",
        "che", "chen", "cheng", "chi", "chong", "chou", "chu", "chua", "chuai", "chuan", "chuang",
        "chui", "chun", "chuo", "ci", "cong", "cou", "cu", "cuan", "cui", "cun", "cuo",
        "da", "dai", "dan", "dang", "dao", "de", "dei", "den", "deng", "di", "dia", "dian", "diao",
        "die", "ding", "diu", "dong", "dou", "du", "duan", "dui", "dun", "duo",
        "e", "ei", "en", "eng", "er",
        "fa", "fan", "fang", "fei", "fen", "feng", "fiao", "fo", "fou", "fu",
        "ga", "gai", "gan", "gang", "gao", "ge", "gei", "gen", "geng", "gong", "gou", "gu", "gua",
        "guai", "guan", "guang", "gui", "gun", "guo",
        "ha", "hai", "han", "hang", "hao", "he", "hei", "hen", "heng", "hong", "hou", "hu", "hua",
        "huai", "huan", "huang", "hui", "hun", "huo",
        "ji", "jia", "jian", "jiang", "jiao", "jie", "jin", "jing", "jiong", "jiu", "ju", "juan",
        "jue", "jun",
        "ka", "kai", "kan", "kang", "kao", "ke", "kei", "ken", "keng", "kong", "kou", "ku", "kua",
        "kuai", "kuan", "kuang", "kui", "kun", "kuo",
        "la", "lai", "lan", "lang", "lao", "le", "lei", "leng", "li", "lia", "lian", "liang", "liao",
        "lie", "lin", "ling", "liu", "lo", "long", "lou", "lu", "luan", "lue", "lun", "luo", "lv",
        "ma", "mai", "man", "mang", "mao", "me", "mei", "men", "meng", "mi", "mian", "miao", "mie",
        "min", "ming", "miu", "mo", "mou", "mu",
        "na", "nai", "nan", "nang", "nao", "ne", "nei", "nen", "neng", "ni", "nian", "niang", "niao",
        "nie", "nin", "ning", "niu", "nong", "nou", "nu", "nuan", "nue", "nun", "nuo", "nü",
        "o", "ou",
        "pa", "pai", "pan", "pang", "pao", "pei", "pen", "peng", "pi", "pian", "piao", "pie", "pin",
        "ping", "po", "pou", "pu",
        "qi", "qia", "qian", "qiang", "qiao", "qie", "qin", "qing", "qiong", "qiu", "qu", "quan",
        "que", "qun",
        "ran", "rang", "rao", "re", "ren", "reng", "ri", "rong", "rou", "ru", "rua", "ruan", "rui",
        "run", "ruo",
        "sa", "sai", "san", "sang", "sao", "se", "sen", "seng", "sha", "shai", "shan", "shang", "shao",
        "she", "shei", "shen", "sheng", "shi", "shou", "shu", "shua", "shuai", "shuan", "shuang",
        "shui", "shun", "shuo", "si", "song", "sou", "su", "suan", "sui", "sun", "suo",
        "ta", "tai", "tan", "tang", "tao", "te", "tei", "teng", "ti", "tian", "tiao", "tie", "ting",
        "tong", "tou", "tu", "tuan", "tui", "tun", "tuo",
        "wa", "wai", "wan", "wang", "wei", "wen", "weng", "wo", "wu",
        "xi", "xia", "xian", "xiang", "xiao", "xie", "xin", "xing", "xiong", "xiu", "xu", "xuan",
        "xue", "xun",
        "ya", "yan", "yang", "yao", "ye", "yi", "yin", "ying", "yo", "yong", "you", "yu", "yuan",
        "yue", "yun",
        "za", "zai", "zan", "zang", "zao", "ze", "zei", "zen", "zeng", "zha", "zhai", "zhan", "zhang",
        "zhao", "zhe", "zhei", "zhen", "zheng", "zhi", "zhong", "zhou", "zhu", "zhua", "zhuai", "zhuan",
        "zhuang", "zhui", "zhun", "zhuo", "zi", "zong", "zou", "zu", "zuan", "zui", "zun", "zuo",
    }
)

# Multi-letter initials come first so "zh" is not consumed as "z" + "h".
INITIAL_CONSONANT_TOKENS = (
    "zh",
    "ch",
    "sh",
    "b",
    "p",
    "m",
    "f",
    "d",
    "t",
    "n",
    "l",
    "g",
    "k",
    "h",
    "j",
    "q",
    "x",
    "r",
    "z",
    "c",
    "s",
    "w",
    "y",
)

# Keyed by StyleKind.value
STYLE_LABELS = MappingProxyType(
    {
        "zh": MappingProxyType(
            {
                "pure_number": "纯数字品相",
                "pure_initial_consonant": "纯声母品相",
                "full_pinyin": "纯拼音品相",
                "pure_letter": "纯字母品相",
                "mixed_alphanumeric": "数字字母风格(杂)",
            }
        ),
        "en": MappingProxyType(
            {
                "pure_number": "pure number",
                "pure_initial_consonant": "pure initial consonant",
                "full_pinyin": "full pinyin",
                "pure_letter": "pure letter",
                "mixed_alphanumeric": "mixed alphanumeric",
            }
        ),
    }
)

ERROR_MESSAGES = MappingProxyType(
    {
        "zh": MappingProxyType(
            {
                "empty": "域名不能为空",
                "invalid_format": "域名格式错误",
                "no_style_matched": "未知品相",
            }
        ),
        "en": MappingProxyType(
            {
                "empty": "domain name must not be empty",
                "invalid_format": "domain name has no suffix",
                "no_style_matched": "unrecognized domain style",
            }
        ),
    }
)

SUPPORTED_LOCALES = frozenset(STYLE_LABELS)
