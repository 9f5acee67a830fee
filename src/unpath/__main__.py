from .scripts import main

main()
