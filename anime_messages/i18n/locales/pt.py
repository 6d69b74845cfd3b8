# Telegram HTML templates. Placeholders use str.format syntax.

STRINGS = {
    # Title lines
    "japan": "🇯🇵 <b>{japan}</b>\n",
    "chinese": "🇨🇳 <b>{chinese}</b>\n",
    "english": "🇺🇸 {english}\n",
    "romaji": "🔤 {romaji}\n",
    "seeMore": "<a href=\"{siteUrl}\">Ver mais</a>\n",

    # Countdown
    "episode": "📺 Episódio {episode}\n",
    "timeUntilAiring": "⏳ Estreia em {timeUntilAiring}\n",
    "airingTime": "{days}d {hours}h {minutes}min",

    # Watchlist menus
    "watchlistOptions": "<b>Sua lista de animes</b>\n\n{anime}",
    "airingAnimeOptions": "<b>Animes em exibição</b>\n\n{anime}",
    "completedAnimeOptions": "<b>Animes finalizados</b>\n\n{anime}",
    "cancelledAnimeOptions": "<b>Animes cancelados</b>\n\n{anime}",
    "soonAnimeOptions": "<b>Animes em breve</b>\n\n{anime}",
    "watchlistMoreInfoOptions": "Escolha qual parte da sua lista de animes você quer ver.",

    # Readlist menus
    "readlistOptions": "<b>Sua lista de mangás</b>\n\n{manga}",
    "publishingMangaOptions": "<b>Mangás em publicação</b>\n\n{manga}",
    "completedMangaOptions": "<b>Mangás finalizados</b>\n\n{manga}",
    "cancelledMangaOptions": "<b>Mangás cancelados</b>\n\n{manga}",
    "soonMangaOptions": "<b>Mangás em breve</b>\n\n{manga}",
    "readlistMoreInfoOptions": "Escolha qual parte da sua lista de mangás você quer ver.",

    # Announcements
    "newRelease": (
        "{image}🆕 <b>Novo lançamento!</b>\n\n"
        "{native}{english}{romaji}\n"
        "{kind}{isAdult}{season}{duration}{startDate}{endDate}\n"
        "{newContent}{streamingEpisodes}\n"
        "<a href=\"{siteUrl}\">Ver mais</a>"
    ),
    "userRelease": (
        "🔔 <b>Um título que você segue foi atualizado!</b>\n\n"
        "{native}{english}{romaji}\n"
        "{kind}{isAdult}\n"
        "{newContent}{streamingEpisodes}\n"
        "<a href=\"{siteUrl}\">Ver mais</a>"
    ),

    # Media fields
    "season": "🍂 Temporada: {season}\n",
    "winter": "Inverno",
    "spring": "Primavera",
    "summer": "Verão",
    "fall": "Outono",
    "adult": "🔞 Conteúdo adulto\n",
    "kind": "🎞 {format} ({source})\n",
    "kindFormat": "🎞 {format}\n",
    "duration": "⏱ {duration} min por episódio\n",
    "startDate": "📅 Começou em {date}\n",
    "startDateSoon": "📅 Começa em {date}\n",
    "endDate": "🏁 Terminou em {date}\n",
    "endDateSoon": "🏁 Termina em {date}\n",
    "dateFull": "{day}/{month}/{year}",
    "dateMonth": "{month}/{year}",
    "newEpisode": "▶️ O episódio {episode} saiu!\n",
    "lastEpisode": "✅ Todos os {episodes} episódios saíram!\n",
    "streamingEpisodes": "\n<b>Assista:</b>\n{episodes}",
    "streamingEpisode": "• <a href=\"{url}\">{title}</a>\n",

    # Media message
    "mediaMessage": (
        "{native}{english}{romaji}\n"
        "{kind}{isAdult}{status}{count}{season}{startDate}{endDate}{duration}{score}{genres}"
        "{description}\n"
        "<a href=\"{siteUrl}\">Ver mais</a>"
    ),
    "status": "📡 {status}\n",
    "statusReleasing": "Em lançamento",
    "statusFinished": "Finalizado",
    "statusCancelled": "Cancelado",
    "statusNotYetReleased": "Ainda não lançado",
    "statusHiatus": "Em hiato",
    "episodes": "📺 {episodes} episódios\n",
    "chapters": "📖 {chapters} capítulos\n",
    "score": "⭐️ {score}%\n",
    "genres": "🏷 {genres}\n",
    "description": "\n<i>{description}</i>\n",
}
