from dinner_chooser.main import main

main()
