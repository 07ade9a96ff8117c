ASSETS_PATH: str = "./assets/"
IMAGES_PATH: str = ASSETS_PATH + "images/"
SOUNDS_PATH: str = ASSETS_PATH + "sounds/"

CAT_TEXTURE_PATH: str = IMAGES_PATH + "cat.png"

# Sounds
CAT_SOUND_PATH: str = SOUNDS_PATH + "cat.wav"
