# Set data models, loaders and asset lookups
