from django.db.models import Q
from django_filters import rest_framework as filters

from ethereum.lib import Denomination, to_minor_units
from marketplace.models import Product, ProductPrice


class MarketplaceFilter(filters.FilterSet):
    """
    Marketplace listing filters.

    `min_price` and `max_price` are human-readable amounts in
    `denomination` (native asset by default) and are compared against the
    stored price in that denomination.
    """

    type = filters.ChoiceFilter(
        field_name="product_type", choices=Product.PRODUCT_TYPE_CHOICES
    )
    search = filters.CharFilter(method="filter_by_search")
    denomination = filters.ChoiceFilter(
        choices=Denomination.choices, method="filter_noop"
    )
    min_price = filters.NumberFilter(method="filter_by_price", min_value=0)
    max_price = filters.NumberFilter(method="filter_by_price", min_value=0)

    class Meta:
        model = Product
        fields = ["type", "search", "denomination", "min_price", "max_price"]

    def filter_noop(self, qs, name, value):
        return qs

    def filter_by_search(self, qs, name, value):
        return qs.filter(
            Q(product_name__icontains=value) | Q(description__icontains=value)
        )

    def filter_by_price(self, qs, name, value):
        denomination = self.form.cleaned_data.get("denomination") or Denomination.NATIVE
        amount = to_minor_units(value, denomination)
        lookup = "gte" if name == "min_price" else "lte"
        prices = ProductPrice.objects.filter(
            denomination=denomination, **{f"amount_minor__{lookup}": amount}
        )
        return qs.filter(pk__in=prices.values("product_id"))
