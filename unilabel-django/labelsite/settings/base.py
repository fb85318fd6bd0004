import os
import sys

from decouple import config

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

ENVIRONMENT = config('ENVIRONMENT', default='production')

SECRET_KEY = config('SECRET_KEY', default='')

DEBUG = config('DEBUG', default=False, cast=bool)

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost').split(',')

# Set to True when running the test suite, so that settings that would
# touch real resources can be overridden.
RUNNING_TEST_SUITE = (len(sys.argv) > 1 and sys.argv[1] == 'test') or 'pytest' in sys.modules

# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'ckeditor',

    'unilabel',
    'accordion',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'labelsite.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [os.path.join(BASE_DIR, 'templates')],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'labelsite.wsgi.application'

# django-ckeditor warns that CKEditor 4 is no longer maintained.
SILENCED_SYSTEM_CHECKS = ['ckeditor.W001']

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Password validation
# https://docs.djangoproject.com/en/4.2/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
]

# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'America/New_York'

USE_I18N = True

USE_TZ = True

# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/4.2/howto/static-files/

STATIC_URL = '/static/'

STATIC_ROOT = config('STATIC_ROOT', default=os.path.join(BASE_DIR, 'static'))

# Rich text editing. The 'allowedContent' rules are enforced on the
# client by CKEditor and on the server by unilabel.fields.SafeHTMLField.
CKEDITOR_CONFIGS = {
    'default': {
        'toolbar': [
            {'name': 'basicstyles', 'items': ['Bold', 'Italic', 'Underline',
                                              'Subscript', 'Superscript']},
            {'name': 'paragraph', 'items': ['NumberedList', 'BulletedList',
                                            'JustifyLeft', 'JustifyCenter']},
            {'name': 'links', 'items': ['Link', 'Unlink']},
            {'name': 'insert', 'items': ['Table']},
            {'name': 'document', 'items': ['Source']},
        ],
        'removePlugins': 'elementspath',
        'allowedContent': {
            'a': {'attributes': ['href', 'title']},
            'b': True,
            'blockquote': True,
            'br': True,
            'code': True,
            'em': True,
            'h3': True,
            'h4': True,
            'i': True,
            'li': True,
            'ol': True,
            'p': {'attributes': ['style']},
            'pre': True,
            'strong': True,
            'sub': True,
            'sup': True,
            'table': {'attributes': ['width']},
            'tbody': True,
            'td': True,
            'th': True,
            'thead': True,
            'tr': True,
            'u': True,
            'ul': True,
        },
        'width': '100%',
    },
    'heading': {
        'toolbar': [
            {'name': 'basicstyles', 'items': ['Bold', 'Italic', 'Underline']},
        ],
        'removePlugins': 'elementspath',
        'allowedContent': {
            'b': True,
            'em': True,
            'i': True,
            'p': True,
            'strong': True,
            'u': True,
        },
        'height': 60,
        'width': '100%',
    },
}

# Content types available to labels, keyed by namespace. 'class' is
# the import path of the unilabel.content_type.ContentType subclass;
# the remaining keys are the plugin-level configuration.
UNILABEL_CONTENT_TYPES = {
    'unilabeltype_accordion': {
        'class': 'accordion.content_type.AccordionContentType',
        'active': config('ACCORDION_ACTIVE', default=True, cast=bool),
        'showintro': config('ACCORDION_SHOWINTRO', default=False, cast=bool),
    },
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': config('DJANGO_LOG_LEVEL', default='INFO'),
        },
        'unilabel': {
            'handlers': ['console'],
            'level': config('UNILABEL_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
        'accordion': {
            'handlers': ['console'],
            'level': config('UNILABEL_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}

if RUNNING_TEST_SUITE:
    LOGGING['loggers']['unilabel']['level'] = 'WARNING'
    LOGGING['loggers']['accordion']['level'] = 'WARNING'
