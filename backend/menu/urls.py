from django.urls import path
from .views import MenuBoardView, MenuItemViewSet, MenuView

app_name = "menu"

urlpatterns = [
    path("menu/", MenuView.as_view(), name="menu"),
    path("menu/board/", MenuBoardView.as_view(), name="menu-board"),
    path("menu-items/", MenuItemViewSet.as_view({'get': 'list', 'post': 'create'}), name="menu-item-list"),
    path("menu-items/<int:pk>/", MenuItemViewSet.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy'
    }), name="menu-item-detail"),
    path("menu-items/<int:pk>/archive/", MenuItemViewSet.as_view({'post': 'archive'}), name="menu-item-archive"),
    path("menu-items/<int:pk>/unarchive/", MenuItemViewSet.as_view({'post': 'unarchive'}), name="menu-item-unarchive"),
]
