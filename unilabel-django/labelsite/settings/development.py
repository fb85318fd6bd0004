import os

from decouple import config

from labelsite.settings.base import *

ENVIRONMENT = 'development'
DEBUG = True

SECRET_KEY = config('SECRET_KEY', default='development-only-secret-key')

ALLOWED_HOSTS = ['*']

# Database
# https://docs.djangoproject.com/en/4.2/ref/settings/#databases

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(BASE_DIR, 'db.sqlite3'),
    }
}
