import logging

from bookcatalog import create_app, describe_endpoints

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

app = create_app()


if __name__ == "__main__":
    port = app.config["PORT"]
    app.logger.info("Book catalog server listening on http://localhost:%s", port)
    for line in describe_endpoints(app):
        app.logger.info("  %s", line)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
