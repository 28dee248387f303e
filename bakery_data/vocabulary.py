FILLING = ("Strawberry", "Chocolate", "Blueberry", "Raspberry", "Vanilla")

TYPE = ("Cake", "Pastry", "Tart", "Muffin", "Biscuit", "Bread", "Bagel",
        "Bun", "Brownie", "Cookie", "Cracker", "Cheese Cake")

FIRST_NAME = ("Ori", "Amanda", "Octavia", "Laurel", "Lael", "Delilah", "Jason", "Skyler", "Arsenio",
              "Haley", "Lionel", "Sylvia", "Jessica", "Lester", "Ferdinand", "Elaine", "Griffin",
              "Kerry", "Dominique")

# "Macias" is listed twice
LAST_NAME = ("Carter", "Castro", "Rich", "Irwin", "Moore", "Hendricks", "Huber", "Patton",
             "Wilkinson", "Thornton", "Nunez", "Macias", "Gallegos", "Blevins", "Mejia", "Pickett",
             "Whitney", "Farmer", "Henry", "Chen", "Macias", "Rowland", "Pierce", "Cortez", "Noble",
             "Howard", "Nixon", "Mcbride", "Leblanc", "Russell", "Carver", "Benton", "Maldonado",
             "Lyons")

PICKUP_LOCATIONS = ("Store", "Bakery")

LACTOSE_FREE = "Lactose free"
GLUTEN_FREE = "Gluten free"
VIP_DETAILS = "Very important customer"

MSG_PLACED = "Order placed"
MSG_CANCELLED = "Order cancelled"
MSG_CONFIRMED = "Order confirmed"
MSG_PROBLEM = "Can't make it. Did not get any ingredients this morning"
MSG_READY = "Order ready for pickup"
MSG_DELIVERED = "Order delivered"
