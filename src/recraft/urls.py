"""recraft URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""

from django.urls import include, path, re_path
from rest_framework import routers

import donation.views
import institution.views
import marketplace.views
import ngo.views
import recraft.views

router = routers.DefaultRouter()

router.register(
    r"institutions",
    institution.views.InstitutionViewSet,
    basename="institutions",
)

router.register(
    r"ngos",
    ngo.views.NGOViewSet,
    basename="ngos",
)

router.register(
    r"products",
    marketplace.views.ProductViewSet,
    basename="products",
)

router.register(
    r"donations",
    donation.views.DonationViewSet,
    basename="donations",
)

urlpatterns = [
    path("api/blockchain/", include("ethereum.urls")),
    re_path(r"^api/", include(router.urls)),
    path("health/", recraft.views.healthcheck, name="health"),
    path("", recraft.views.index, name="index"),
]

handler404 = recraft.views.route_not_found
