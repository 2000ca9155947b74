from gridsnake.main import main

main()
