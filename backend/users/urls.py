from django.urls import path
from .views import (
    CurrentUserView,
    EmployeeRoleView,
    EmployeeViewSet,
    LoginView,
    LogoutView,
)

app_name = "users"

urlpatterns = [
    # Auth
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("me/", CurrentUserView.as_view(), name="me"),

    # Employee management
    path("employees/", EmployeeViewSet.as_view({'get': 'list', 'post': 'create'}), name="employee-list"),
    path("employees/role/", EmployeeRoleView.as_view(), name="employee-role"),
    path("employees/<int:pk>/", EmployeeViewSet.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy'
    }), name="employee-detail"),
    path("employees/<int:pk>/archive/", EmployeeViewSet.as_view({'post': 'archive'}), name="employee-archive"),
    path("employees/<int:pk>/unarchive/", EmployeeViewSet.as_view({'post': 'unarchive'}), name="employee-unarchive"),
]
