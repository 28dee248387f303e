#!/usr/bin/env python3
import argparse, json, logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List

import pandas as pd

from . import config
from .generator import DataGenerator
from .model import OrderState
from .random_stream import RandomStream
from .security import WerkzeugPasswordHasher
from .storage import DemoStore

logger = logging.getLogger(__name__)

@dataclass
class Paths:
    out: Path
    @property
    def products_csv(self): return self.out / "products.csv"
    @property
    def users_csv(self): return self.out / "users.csv"
    @property
    def pickup_locations_csv(self): return self.out / "pickup_locations.csv"
    @property
    def orders_csv(self): return self.out / "orders.csv"
    @property
    def order_items_csv(self): return self.out / "order_items.csv"
    @property
    def order_history_csv(self): return self.out / "order_history.csv"
    @property
    def stats_root(self): return self.out / "stats"
    @property
    def schema_json(self): return self.out / "schema.json"

def iso(dt: datetime): return dt.strftime("%Y-%m-%dT%H:%M:%S")

def ensure_dirs(p: Paths):
    p.out.mkdir(parents=True, exist_ok=True)
    p.stats_root.mkdir(parents=True, exist_ok=True)

def write_csv(df: pd.DataFrame, path: Path):
    path.parent.mkdir(parents=True, exist_ok=True); df.to_csv(path, index=False)

def write_json(obj, path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f: json.dump(obj, f, ensure_ascii=False, separators=(",", ":"))

# --- store -> DataFrames ---

TABLES = {
    "products": ["product_id", "name", "price"],
    "users": ["user_id", "email", "first_name", "last_name", "role", "locked"],
    "pickup_locations": ["pickup_location_id", "name"],
    "orders": ["order_id", "created_by", "customer_name", "customer_phone", "customer_details",
               "pickup_location_id", "due_date", "due_time", "state", "total_price"],
    "order_items": ["order_id", "product_id", "quantity", "comment", "line_price"],
    "order_history": ["order_id", "seq", "created_by", "message", "new_state", "timestamp"],
}

def products_df(store: DemoStore) -> pd.DataFrame:
    rows = [{"product_id": p.id, "name": p.name, "price": p.price} for p in store.products.all()]
    return pd.DataFrame(rows, columns=TABLES["products"])

def users_df(store: DemoStore) -> pd.DataFrame:
    # password hashes never leave the store
    rows = [{"user_id": u.id, "email": u.email, "first_name": u.first_name, "last_name": u.last_name,
             "role": u.role.value, "locked": u.locked} for u in store.users.all()]
    return pd.DataFrame(rows, columns=TABLES["users"])

def pickup_locations_df(store: DemoStore) -> pd.DataFrame:
    rows = [{"pickup_location_id": l.id, "name": l.name} for l in store.pickup_locations.all()]
    return pd.DataFrame(rows, columns=TABLES["pickup_locations"])

def orders_df(store: DemoStore) -> pd.DataFrame:
    rows = [{
        "order_id": o.id,
        "created_by": o.created_by.email,
        "customer_name": o.customer.full_name,
        "customer_phone": o.customer.phone_number,
        "customer_details": o.customer.details,
        "pickup_location_id": o.pickup_location.id,
        "due_date": o.due_date.isoformat(),
        "due_time": o.due_time.strftime("%H:%M"),
        "state": o.state.value,
        "total_price": o.total_price,
    } for o in store.orders.all()]
    return pd.DataFrame(rows, columns=TABLES["orders"])

def order_items_df(store: DemoStore) -> pd.DataFrame:
    rows = [{"order_id": o.id, "product_id": i.product.id, "quantity": i.quantity, "comment": i.comment,
             "line_price": i.product.price * i.quantity}
            for o in store.orders.all() for i in o.items]
    return pd.DataFrame(rows, columns=TABLES["order_items"])

def order_history_df(store: DemoStore) -> pd.DataFrame:
    rows = [{"order_id": o.id, "seq": n, "created_by": h.created_by.email, "message": h.message,
             "new_state": h.new_state.value, "timestamp": iso(h.timestamp)}
            for o in store.orders.all() for n, h in enumerate(o.history)]
    return pd.DataFrame(rows, columns=TABLES["order_history"])

# --- stats ---

def stats_orders_by_month(orders: pd.DataFrame) -> List[Dict]:
    if len(orders)==0: return []
    df = orders.assign(month=orders["due_date"].str.slice(0, 7))
    g = df.groupby("month")["total_price"].agg(["count","sum"]).reset_index().sort_values("month")
    return [{"month": r["month"], "orders": int(r["count"]), "revenue": int(r["sum"])} for _, r in g.iterrows()]

def stats_state_mix(orders: pd.DataFrame) -> List[Dict]:
    if len(orders)==0: return []
    counts = orders["state"].value_counts(); total = int(counts.sum())
    # fixed enum order, zero rows included
    return [{"state": s.value, "orders": int(counts.get(s.value, 0)), "share": round(int(counts.get(s.value, 0))/total, 4)}
            for s in OrderState]

def stats_top_products(items: pd.DataFrame, products: pd.DataFrame, topn=5) -> List[Dict]:
    if len(items)==0: return []
    g = items.groupby("product_id").agg(quantity=("quantity","sum"), revenue=("line_price","sum")).reset_index()
    merged = g.merge(products, on="product_id", how="left").sort_values(["revenue","product_id"], ascending=[False,True]).head(topn)
    return [{"product_id": int(r["product_id"]), "name": r["name"], "quantity": int(r["quantity"]), "revenue": int(r["revenue"])}
            for _, r in merged.iterrows()]

def emit_schema_json(paths: Paths):
    write_json({"brand": "Bakery", "tables": TABLES}, paths.schema_json)

def export_store(store: DemoStore, out: Path) -> Paths:
    paths = Paths(Path(out)); ensure_dirs(paths)

    products = products_df(store); orders = orders_df(store); items = order_items_df(store)
    write_csv(products, paths.products_csv)
    write_csv(users_df(store), paths.users_csv)
    write_csv(pickup_locations_df(store), paths.pickup_locations_csv)
    write_csv(orders, paths.orders_csv)
    write_csv(items, paths.order_items_csv)
    write_csv(order_history_df(store), paths.order_history_csv)

    emit_schema_json(paths)
    write_json(stats_orders_by_month(orders), paths.stats_root / "orders-by-month.json")
    write_json(stats_state_mix(orders), paths.stats_root / "state-mix.json")
    write_json(stats_top_products(items, products), paths.stats_root / "top-products.json")
    logger.info("Wrote %d orders to %s", len(orders), paths.out)
    return paths

def main(argv=None):
    ap = argparse.ArgumentParser(description="Generate bakery demo data and export it as CSV/JSON.")
    ap.add_argument("--out", default=str(config.ASSETS_DIR))
    ap.add_argument("--seed", type=int, default=config.SEED)
    ap.add_argument("--today", type=date.fromisoformat, default=config.TODAY, help="YYYY-MM-DD, defaults to the real today")
    ap.add_argument("--years", type=int, default=config.YEARS_TO_INCLUDE)
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    store = DemoStore()
    DataGenerator(store, WerkzeugPasswordHasher(), rng=RandomStream(args.seed), today=args.today,
                  years_to_include=args.years).load_data()
    paths = export_store(store, Path(args.out))

    print(f"✅ Generated assets under: {paths.out.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
