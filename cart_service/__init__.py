######################################################################
# Copyright 2016, 2024 John J. Rofrano. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
######################################################################
"""
Package: cart_service
Package for the application models and service routes
This module creates and configures the Flask app and sets up the logging
and MongoDB connection
"""
import sys

from flask import Flask
from pymongo.errors import PyMongoError

from cart_service import config
from cart_service.common import log_handlers


############################################################
# Initialize the Flask instance
############################################################
def create_app(config_overrides: dict | None = None, client=None):
    """Initialize the core application."""
    # pylint: disable=import-outside-toplevel
    from cart_service import routes
    from cart_service.api import create_api
    from cart_service.common.error_handlers import init_error_handlers
    from cart_service.models import init_store

    # Create Flask application
    app = Flask(__name__)
    app.config.from_object(config)
    if config_overrides:
        app.config.update(config_overrides)

    # Set up logging for production
    log_handlers.init_logging(app, "gunicorn.error")

    try:
        init_store(app, client)
    except PyMongoError as error:
        app.logger.critical("%s: Cannot continue", error)
        # gunicorn requires exit code 4 to stop spawning workers when they die
        sys.exit(4)

    # The index claims "/" before Flask-RESTX adds its own root rule
    app.register_blueprint(routes.bp)
    api = create_api(app)
    init_error_handlers(app, api)

    app.logger.info(70 * "*")
    app.logger.info("  C A R T   S E R V I C E   R U N N I N G  ".center(70, "*"))
    app.logger.info(70 * "*")

    app.logger.info("Service initialized!")

    return app
