"""
Prompt templates for the travel assistant.

Everything here is pure: the same category, location and text always
produce the same two strings.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from travel_lens.schemas.analyze import Category, ResolvedLocation


DEFAULT_SYSTEM_PROMPT = "You are a helpful travel assistant."

SYSTEM_PROMPTS: Dict[Category, str] = {
    Category.MENU: """
你是一位餐廳助手。
請翻譯並解釋菜單內容，包含菜名、食材和烹飪方式等資訊，內容需精簡但具資訊量，並著重於提供旅客實用的建議。
""".strip(),
    Category.SUPERMARKET: """
你是一位超市與商品助手。
請解說超市的商品、它們的常見用途，以及相關的文化背景。
重點是協助旅客判斷是否值得購買，以及買回去後該如何使用。
""".strip(),
    Category.ATTRACTION: """
你是一位旅遊景點導覽助手。
請解說該景點的歷史、文化背景，以及任何實用的參觀建議。
""".strip(),
}

UNKNOWN_CITY = "Unknown"
NO_TEXT_PLACEHOLDER = "(沒有提供文字，主要依靠圖片與定位)"

USER_PROMPT_TEMPLATE = """
使用者目前所在地：
\t•\t國家：{country}
\t•\t地區：{region}
\t•\t城市：{city}
\t•\t座標：({lat}, {lng})

分類：{category}

使用者的文字／問題：
{text}

回答時請遵循以下原則：
\t•\t一律假設使用者是旅客，可能不熟悉當地語言與文化。
\t•\t使用清楚、簡單的語句。
\t•\t若有需要，可提及當地習俗或「當地人通常怎麼做」。
"""


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def _category_label(category: Union[Category, str]) -> str:
    return category.value if isinstance(category, Category) else str(category)


def _format_coordinate(value: float) -> str:
    # 25.0 -> "25", 121.56 -> "121.56"
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def build_system_prompt(category: Union[Category, str]) -> str:
    """Role instructions for the category.

    Categories are validated before they get here, so the default prompt is
    only reachable when this function is called directly.
    """
    try:
        return SYSTEM_PROMPTS[Category(category)]
    except ValueError:
        return DEFAULT_SYSTEM_PROMPT


def build_user_prompt(
    text: Optional[str],
    category: Union[Category, str],
    location: ResolvedLocation,
) -> str:
    return USER_PROMPT_TEMPLATE.format(
        country=location.country,
        region=location.region,
        city=location.city if location.city is not None else UNKNOWN_CITY,
        lat=_format_coordinate(location.lat),
        lng=_format_coordinate(location.lng),
        category=_category_label(category),
        text=text or NO_TEXT_PLACEHOLDER,
    ).strip()


def build_prompts(
    category: Union[Category, str],
    location: ResolvedLocation,
    text: Optional[str],
) -> PromptPair:
    return PromptPair(
        system=build_system_prompt(category),
        user=build_user_prompt(text, category, location),
    )
