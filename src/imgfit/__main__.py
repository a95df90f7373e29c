from imgfit.cli import main

main()
