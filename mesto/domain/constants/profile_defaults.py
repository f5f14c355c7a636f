"""Profile values applied when a user registers without them"""

DEFAULT_NAME = "Жак-Ив Кусто"
DEFAULT_ABOUT = "Исследователь"
DEFAULT_AVATAR = "https://pictures.s3.yandex.net/resources/jacques-cousteau_1604399756.png"
