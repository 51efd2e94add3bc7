from silversettings.cli import main

main()
