"""
Configuraciones específicas para el servicio de noticias.
"""

# Importación masiva
IMPORT_FLUSH_SIZE = 100  # Noticias acumuladas antes de escribir un lote
BATCH_WRITER_CHUNK_SIZE = 50  # Tamaño de cada sub-lote dentro de la transacción
PUBLISHED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"
BULK_IMPORT_LOCK_NAME = "news_bulk_import"
BULK_NEWS_ITEMS_FIELD = "news_items"

# Paginación
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Noticias populares
DEFAULT_HOT_LIMIT = 10
MAX_HOT_LIMIT = 100

# Administrador inicial (si no se indica en el entorno)
DEFAULT_ADMIN_EMAIL = "admin@newsdesk.com"
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123456"

# Fuentes RSS por defecto
DEFAULT_RSS_SOURCES = [
    {
        'name': "新浪新闻",
        'url': "http://rss.sina.com.cn/news/china/focus15.xml",
        'category': "国内新闻",
        'language': "zh",
        'is_active': True,
        'description': "新浪网国内新闻RSS源",
        'priority': 1,
        'update_freq': 60
    },
    {
        'name': "网易科技",
        'url': "http://rss.163.com/rss/tech_index.xml",
        'category': "科技",
        'language': "zh",
        'is_active': True,
        'description': "网易科技新闻RSS源",
        'priority': 1,
        'update_freq': 60
    }
]
