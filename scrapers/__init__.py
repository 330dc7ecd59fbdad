# scrapers/__init__.py
# One scraper per supported site; scrapers.dispatcher.scrape_recipe picks the right one.
