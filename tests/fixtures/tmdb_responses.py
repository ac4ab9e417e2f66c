"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the catalog endpoints.
These fixtures are used with respx (httpx mocking) or fed straight to the
decoder.
"""

# Search response for "Avatar" query
# GET /search/movie?query=Avatar&page=1&include_adult=false
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
            "genre_ids": [28, 12, 14, 878],
            "id": 19995,
            "original_language": "en",
            "original_title": "Avatar",
            "overview": "L'histoire d'un ancien marine paraplégique...",
            "popularity": 456.92,
            "poster_path": "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
            "release_date": "2009-12-15",
            "title": "Avatar",
            "video": False,
            "vote_average": 7.6,
            "vote_count": 27000,
        },
        {
            "adult": False,
            "backdrop_path": "/7BIwGH0WAEN3tQsB1X5HnVjj2bR.jpg",
            "genre_ids": [28, 12, 878],
            "id": 76600,
            "original_language": "en",
            "original_title": "Avatar: The Way of Water",
            "overview": "Se déroulant plus d'une décennie après les événements...",
            "popularity": 234.56,
            "poster_path": "/t6HIqrRAclMCA60NsSmeqe9RmNV.jpg",
            "release_date": "2022-12-14",
            "title": "Avatar: La Voie de l'eau",
            "video": False,
            "vote_average": 7.7,
            "vote_count": 12000,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# Empty search response
TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# Search response for "Breaking Bad"
# GET /search/tv?query=Breaking%20Bad&page=1&include_adult=false
TMDB_TV_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
            "genre_ids": [18, 80],
            "id": 1396,
            "origin_country": ["US"],
            "original_language": "en",
            "original_name": "Breaking Bad",
            "overview": "Walter White, professeur de chimie...",
            "popularity": 288.4,
            "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
            "first_air_date": "2008-01-20",
            "name": "Breaking Bad",
            "vote_average": 8.9,
            "vote_count": 13500,
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

# Movie details for Avatar (id=19995): genres as full objects, no genre_ids
# GET /movie/19995
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
    "belongs_to_collection": {
        "id": 87096,
        "name": "Avatar - Saga",
        "poster_path": "/uO2yU3QiGHvVp0L5e5IatTVRkYk.jpg",
        "backdrop_path": "/iaEsDbQPE45hQU2EGiNjXD2KWuF.jpg",
    },
    "budget": 237000000,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 12, "name": "Aventure"},
        {"id": 14, "name": "Fantastique"},
        {"id": 878, "name": "Science-Fiction"},
    ],
    "homepage": "https://www.avatar.com",
    "id": 19995,
    "imdb_id": "tt0499549",
    "original_language": "en",
    "original_title": "Avatar",
    "overview": "Malgré sa paralysie, Jake Sully, un ancien marine immobilisé dans un fauteuil roulant, est resté un combattant au plus profond de son être...",
    "popularity": 456.92,
    "poster_path": "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
    "release_date": "2009-12-15",
    "revenue": 2923706026,
    "runtime": 162,
    "status": "Released",
    "tagline": "Entrez dans un nouveau monde.",
    "title": "Avatar",
    "video": False,
    "vote_average": 7.6,
    "vote_count": 27000,
}

# TV details for Breaking Bad (id=1396)
# GET /tv/1396
TMDB_TV_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
    "first_air_date": "2008-01-20",
    "genres": [
        {"id": 18, "name": "Drame"},
        {"id": 80, "name": "Crime"},
    ],
    "id": 1396,
    "name": "Breaking Bad",
    "number_of_seasons": 5,
    "origin_country": ["US"],
    "original_language": "en",
    "original_name": "Breaking Bad",
    "overview": "Walter White, professeur de chimie...",
    "popularity": 288.4,
    "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
    "status": "Ended",
    "vote_average": 8.9,
    "vote_count": 13500,
}

# GET /genre/movie/list
TMDB_MOVIE_GENRES_RESPONSE = {
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 12, "name": "Aventure"},
        {"id": 16, "name": "Animation"},
        {"id": 35, "name": "Comédie"},
    ]
}

# GET /movie/19995/credits
TMDB_MOVIE_CREDITS_RESPONSE = {
    "id": 19995,
    "cast": [
        {
            "adult": False,
            "gender": 2,
            "id": 65731,
            "known_for_department": "Acting",
            "name": "Sam Worthington",
            "original_name": "Sam Worthington",
            "popularity": 30.1,
            "profile_path": "/blKKsHlJIL9PmUQZB8f3YmMBW5Y.jpg",
            "cast_id": 242,
            "character": "Jake Sully",
            "credit_id": "5602a8a7c3a3685532001c9a",
            "order": 0,
        },
        {
            "adult": False,
            "gender": 1,
            "id": 8691,
            "known_for_department": "Acting",
            "name": "Zoe Saldaña",
            "original_name": "Zoe Saldaña",
            "popularity": 50.2,
            "profile_path": "/iOVbUH20il632nj2v01NCtYYeSg.jpg",
            "cast_id": 3,
            "character": "Neytiri",
            "credit_id": "52fe48009251416c750ac9cb",
            "order": 1,
        },
    ],
    "crew": [
        {
            "adult": False,
            "gender": 2,
            "id": 2710,
            "known_for_department": "Directing",
            "name": "James Cameron",
            "original_name": "James Cameron",
            "popularity": 20.4,
            "profile_path": "/9NAZnTjBQ9WcXAQEzZpKy4vdQto.jpg",
            "credit_id": "52fe48009251416c750aca23",
            "department": "Directing",
            "job": "Director",
        },
    ],
}

# GET /movie/19995/watch/providers
TMDB_WATCH_PROVIDERS_RESPONSE = {
    "id": 19995,
    "results": {
        "FR": {
            "link": "https://www.themoviedb.org/movie/19995-avatar/watch?locale=FR",
            "flatrate": [
                {
                    "logo_path": "/97yvRBw1GzX7fXprcF80er19ot.jpg",
                    "provider_id": 337,
                    "provider_name": "Disney Plus",
                    "display_priority": 1,
                }
            ],
            "rent": [
                {
                    "logo_path": "/5NyLm42TmCqCMOZFvH4fcoSNKEW.jpg",
                    "provider_id": 10,
                    "provider_name": "Amazon Video",
                    "display_priority": 5,
                },
                {
                    "logo_path": "/9ghgSC0MA082EL6HLCW3GalykFD.jpg",
                    "provider_id": 2,
                    "provider_name": "Apple TV",
                    "display_priority": 6,
                },
            ],
        },
        "US": {
            "link": "https://www.themoviedb.org/movie/19995-avatar/watch?locale=US",
            "buy": [
                {
                    "logo_path": "/9ghgSC0MA082EL6HLCW3GalykFD.jpg",
                    "provider_id": 2,
                    "provider_name": "Apple TV",
                    "display_priority": 4,
                }
            ],
        },
    },
}
