# paysync/__main__.py
from paysync.main_app import main

main()
