from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.transactions.api.v1.views import health

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health', health, name='health'),
    path('v1/', include('apps.transactions.api.v1.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
