from sunnyweather.bot import main

main()
