"""Field (work site) schema."""

from src.core.rules import RuleConfigBuilder

FIELD_SCHEMA = (
    RuleConfigBuilder("field")
    .add_string("field_code", label="現場コード", required=True, max_length=50)
    .add_string("field_name", label="現場名", required=True, max_length=255)
    .add_string("customer_name", label="顧客名", max_length=255)
    .add_string("address", label="住所")
    .add_boolean("has_electricity", label="電気", default=False)
    .add_boolean("has_water", label="水道", default=False)
    .add_boolean("has_toilet", label="トイレ", default=False)
    .add_string("toilet_distance", label="トイレまでの距離", max_length=100)
    .add_number("travel_distance_km", label="移動距離", minimum=0)
    .add_integer("travel_time_minutes", label="移動時間", minimum=0)
    .add_integer("travel_cost", label="移動費", minimum=0)
    .add_string("notes", label="備考")
    .add_string("warnings", label="注意事項")
    .build()
)
