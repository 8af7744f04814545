"""
WSGI config for the calcavendas project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'calcavendas.settings')

application = get_wsgi_application()
