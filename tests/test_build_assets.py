import json

import pandas as pd

from bakery_data.build_assets import TABLES, export_store, main, orders_df, stats_state_mix
from bakery_data.model import OrderState


def test_export_writes_every_table(generated_store, tmp_path):
    paths = export_store(generated_store, tmp_path)

    for table, columns in TABLES.items():
        df = pd.read_csv(tmp_path / f"{table}.csv")
        assert list(df.columns) == columns

    orders = pd.read_csv(paths.orders_csv)
    assert len(orders) == generated_store.orders.count()
    items = pd.read_csv(paths.order_items_csv)
    assert len(items) == sum(len(o.items) for o in generated_store.orders.all())
    history = pd.read_csv(paths.order_history_csv)
    assert set(history["new_state"]) <= {s.value for s in OrderState}

    schema = json.loads(paths.schema_json.read_text(encoding="utf-8"))
    assert set(schema["tables"]) == set(TABLES)


def test_users_export_has_no_password_hash(generated_store, tmp_path):
    export_store(generated_store, tmp_path)
    users = pd.read_csv(tmp_path / "users.csv")
    assert "password_hash" not in users.columns
    assert len(users) == 5


def test_stats(generated_store, tmp_path):
    paths = export_store(generated_store, tmp_path)
    months = json.loads((paths.stats_root / "orders-by-month.json").read_text())
    assert months[0]["month"] == "2022-01"
    assert sum(m["orders"] for m in months) == generated_store.orders.count()

    mix = json.loads((paths.stats_root / "state-mix.json").read_text())
    assert [m["state"] for m in mix] == [s.value for s in OrderState]
    assert sum(m["orders"] for m in mix) == generated_store.orders.count()

    top = json.loads((paths.stats_root / "top-products.json").read_text())
    assert len(top) == 5
    assert [t["revenue"] for t in top] == sorted((t["revenue"] for t in top), reverse=True)


def test_state_mix_empty():
    assert stats_state_mix(pd.DataFrame(columns=TABLES["orders"])) == []


def test_orders_df_columns(generated_store):
    df = orders_df(generated_store)
    assert list(df.columns) == TABLES["orders"]
    assert df.iloc[0]["due_time"] == "08:00"


def test_cli(tmp_path):
    assert main(["--out", str(tmp_path), "--today", "2024-03-15", "--years", "0", "--seed", "3"]) == 0
    orders = pd.read_csv(tmp_path / "orders.csv")
    assert orders.iloc[0]["due_date"] == "2024-03-15"
    assert (tmp_path / "stats" / "top-products.json").exists()
