"""Views de infraestrutura do projeto."""

from django.http import JsonResponse


def health(request):
    return JsonResponse({'status': 'ok'})
