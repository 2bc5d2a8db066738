import serverless_wsgi

from foodlens import create_app
from foodlens.config.settings import ProductionConfig

app = create_app(ProductionConfig)


def handler(event, context):
    return serverless_wsgi.handle_request(app, event, context)
