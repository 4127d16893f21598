from reqline.cli import main

main()
