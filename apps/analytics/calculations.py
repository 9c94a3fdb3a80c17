# ===== apps/analytics/calculations.py =====
"""Financial summary derived from a user's items. Nothing here is persisted."""
from django.forms.models import model_to_dict

TOP_ITEMS_LIMIT = 5


def _value(item, field):
    return item[field] if isinstance(item, dict) else getattr(item, field)


def _as_dict(item):
    return dict(item) if isinstance(item, dict) else model_to_dict(item)


def item_profit(item):
    """(selling - buying) * quantity for a model instance or a dict"""
    return (_value(item, 'selling_price') - _value(item, 'buying_price')) * _value(item, 'quantity_value')


def compute_analytics(items, serialize=_as_dict):
    """
    Build the analytics snapshot for a list of items.

    `serialize` turns an item into the dict used in topItems; the view passes
    the item serializer. By default dicts are copied and model instances go
    through model_to_dict.
    Ties in topItems keep the input order (sorted() is stable).
    """
    items = list(items)

    total_investment = sum(_value(i, 'buying_price') * _value(i, 'quantity_value') for i in items)
    total_revenue = sum(_value(i, 'selling_price') * _value(i, 'quantity_value') for i in items)
    total_profit = total_revenue - total_investment

    # Margin is 0 without investment, even when there is revenue
    profit_margin = (total_profit / total_investment) * 100 if total_investment > 0 else 0

    ranked = sorted(items, key=item_profit, reverse=True)[:TOP_ITEMS_LIMIT]
    top_items = [{**serialize(i), 'profit': item_profit(i)} for i in ranked]

    return {
        'totalInvestment': total_investment,
        'totalRevenue': total_revenue,
        'totalProfit': total_profit,
        'profitMargin': round(profit_margin, 2),
        'totalItems': len(items),
        'topItems': top_items,
    }
