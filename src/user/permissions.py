from rest_framework.permissions import BasePermission


class IsInstitutionAccount(BasePermission):
    message = "Access denied: institution account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_institution)


class IsNGOAccount(BasePermission):
    message = "Access denied: NGO account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_ngo)
