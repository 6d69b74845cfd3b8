# Telegram HTML templates. Placeholders use str.format syntax.

STRINGS = {
    # Title lines
    "japan": "🇯🇵 <b>{japan}</b>\n",
    "chinese": "🇨🇳 <b>{chinese}</b>\n",
    "english": "🇺🇸 {english}\n",
    "romaji": "🔤 {romaji}\n",
    "seeMore": "<a href=\"{siteUrl}\">See more</a>\n",

    # Countdown
    "episode": "📺 Episode {episode}\n",
    "timeUntilAiring": "⏳ Airs in {timeUntilAiring}\n",
    "airingTime": "{days}d {hours}h {minutes}m",

    # Watchlist menus
    "watchlistOptions": "<b>Your watchlist</b>\n\n{anime}",
    "airingAnimeOptions": "<b>Airing anime</b>\n\n{anime}",
    "completedAnimeOptions": "<b>Completed anime</b>\n\n{anime}",
    "cancelledAnimeOptions": "<b>Cancelled anime</b>\n\n{anime}",
    "soonAnimeOptions": "<b>Upcoming anime</b>\n\n{anime}",
    "watchlistMoreInfoOptions": "Choose which part of your watchlist you want to see.",

    # Readlist menus
    "readlistOptions": "<b>Your readlist</b>\n\n{manga}",
    "publishingMangaOptions": "<b>Publishing manga</b>\n\n{manga}",
    "completedMangaOptions": "<b>Completed manga</b>\n\n{manga}",
    "cancelledMangaOptions": "<b>Cancelled manga</b>\n\n{manga}",
    "soonMangaOptions": "<b>Upcoming manga</b>\n\n{manga}",
    "readlistMoreInfoOptions": "Choose which part of your readlist you want to see.",

    # Announcements
    "newRelease": (
        "{image}🆕 <b>New release!</b>\n\n"
        "{native}{english}{romaji}\n"
        "{kind}{isAdult}{season}{duration}{startDate}{endDate}\n"
        "{newContent}{streamingEpisodes}\n"
        "<a href=\"{siteUrl}\">See more</a>"
    ),
    "userRelease": (
        "🔔 <b>A title you follow was updated!</b>\n\n"
        "{native}{english}{romaji}\n"
        "{kind}{isAdult}\n"
        "{newContent}{streamingEpisodes}\n"
        "<a href=\"{siteUrl}\">See more</a>"
    ),

    # Media fields
    "season": "🍂 Season: {season}\n",
    "winter": "Winter",
    "spring": "Spring",
    "summer": "Summer",
    "fall": "Fall",
    "adult": "🔞 Adult content\n",
    "kind": "🎞 {format} ({source})\n",
    "kindFormat": "🎞 {format}\n",
    "duration": "⏱ {duration} min per episode\n",
    "startDate": "📅 Started on {date}\n",
    "startDateSoon": "📅 Starts on {date}\n",
    "endDate": "🏁 Ended on {date}\n",
    "endDateSoon": "🏁 Ends on {date}\n",
    "dateFull": "{month}/{day}/{year}",
    "dateMonth": "{month}/{year}",
    "newEpisode": "▶️ Episode {episode} is out!\n",
    "lastEpisode": "✅ All {episodes} episodes are out!\n",
    "streamingEpisodes": "\n<b>Watch:</b>\n{episodes}",
    "streamingEpisode": "• <a href=\"{url}\">{title}</a>\n",

    # Media message
    "mediaMessage": (
        "{native}{english}{romaji}\n"
        "{kind}{isAdult}{status}{count}{season}{startDate}{endDate}{duration}{score}{genres}"
        "{description}\n"
        "<a href=\"{siteUrl}\">See more</a>"
    ),
    "status": "📡 {status}\n",
    "statusReleasing": "Releasing",
    "statusFinished": "Finished",
    "statusCancelled": "Cancelled",
    "statusNotYetReleased": "Not yet released",
    "statusHiatus": "On hiatus",
    "episodes": "📺 {episodes} episodes\n",
    "chapters": "📖 {chapters} chapters\n",
    "score": "⭐️ {score}%\n",
    "genres": "🏷 {genres}\n",
    "description": "\n<i>{description}</i>\n",
}
