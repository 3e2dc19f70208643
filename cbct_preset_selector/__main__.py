from cbct_preset_selector.cli.main import main

main()
