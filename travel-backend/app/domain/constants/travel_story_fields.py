"""Constants for TravelStory model field names"""


class TravelStoryFields:
    """Field name constants for TravelStory model"""
    ID = "id"
    USER_ID = "userId"
    TITLE = "title"
    STORY = "story"
    VISITED_LOCATION = "visitedLocation"
    IMAGE_URL = "imageUrl"
    VISITED_DATE = "visitedDate"
    IS_FAVOURITE = "isFavourite"
    CREATED_ON = "createdOn"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
