# product_crawler/__init__.py

# Sequential crawler for the tkaninydzieciece.com.pl search listing.
