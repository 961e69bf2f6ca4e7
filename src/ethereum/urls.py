from django.urls import path

from ethereum import views

urlpatterns = [
    path("contract-info/", views.contract_info, name="contract_info"),
    path(
        "donations/available/list/",
        views.available_donations,
        name="chain_available_donations",
    ),
    path(
        "products/available/list/",
        views.available_products,
        name="chain_available_products",
    ),
    path("donations/<int:blockchain_id>/", views.donation, name="chain_donation"),
    path("products/<int:blockchain_id>/", views.product, name="chain_product"),
    path(
        "transaction/<str:transaction_hash>/",
        views.transaction,
        name="chain_transaction",
    ),
    path(
        "explorer-link/<str:transaction_hash>/",
        views.explorer_link,
        name="explorer_link",
    ),
    path("verify-signature/", views.verify_signature, name="verify_signature"),
]
