"""Settings schemas (the base address used for travel distance)."""

from src.core.rules import RuleConfigBuilder

LAT_MESSAGE = "緯度は-90〜90の範囲で入力してください"
LNG_MESSAGE = "経度は-180〜180の範囲で入力してください"

BASE_ADDRESS_SCHEMA = (
    RuleConfigBuilder("base_address")
    .add_string(
        "address",
        label="住所",
        required=True,
        max_length=500,
        messages={"required": "基準住所を入力してください"},
    )
    .add_number(
        "lat",
        label="緯度",
        required=True,
        minimum=-90,
        maximum=90,
        messages={"minimum": LAT_MESSAGE, "maximum": LAT_MESSAGE},
    )
    .add_number(
        "lng",
        label="経度",
        required=True,
        minimum=-180,
        maximum=180,
        messages={"minimum": LNG_MESSAGE, "maximum": LNG_MESSAGE},
    )
    .build()
)
