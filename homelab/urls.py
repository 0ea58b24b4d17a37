"""
Home Lab Inventory - URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from homelab.views import DashboardView
from homelab.inventory.rpc import RPCIndexView, RPCView

urlpatterns = [
    # Admin site
    path('admin/', admin.site.urls),

    # Dashboard (home)
    path('', DashboardView.as_view(), name='dashboard'),

    # RPC endpoint (all procedures)
    path('rpc/', RPCIndexView.as_view(), name='rpc_index'),
    path('rpc/<str:procedure>', RPCView.as_view(), name='rpc'),

    # Apps
    path('inventory/', include('homelab.inventory.urls')),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# Customize admin site
admin.site.site_header = 'Home Lab Inventory'
admin.site.site_title = 'Home Lab Admin'
admin.site.index_title = 'Inventory Administration'
