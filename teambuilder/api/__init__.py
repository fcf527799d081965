# HTTP layer: app, config, routes
