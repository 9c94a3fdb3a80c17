from django.contrib import admin
from django.http import HttpResponse
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static


def index(request):
    return HttpResponse('GD Farms backend is running.', content_type='text/plain')


urlpatterns = [
    path('', index, name='index'),
    path('admin/', admin.site.urls),
    path('api/', include('apps.users.health_urls')),
    path('api/user/', include('apps.users.user_urls')),
    path('api/settings/', include('apps.users.urls')),
    path('api/', include('apps.inventory.urls')),
    path('api/analytics/', include('apps.analytics.urls')),
    path('api/', include('apps.goals.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = 'gdfarms.exceptions.not_found'
handler500 = 'gdfarms.exceptions.server_error'

admin.site.site_header = "GD Farms Administration"
admin.site.site_title = "GD Farms Admin"
admin.site.index_title = "Welcome to GD Farms"
