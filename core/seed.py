# Sample catalogue written to empty collections on first start.

SAMPLE_CATEGORIES = [
    {"id": "1", "name": "Pizza", "icon": "🍕"},
    {"id": "2", "name": "Burger", "icon": "🍔"},
    {"id": "3", "name": "Sushi", "icon": "🍣"},
    {"id": "4", "name": "Salad", "icon": "🥗"},
    {"id": "5", "name": "Sobremesas", "icon": "🍰"},
    {"id": "6", "name": "Bebidas", "icon": "🥤"},
]

SAMPLE_RESTAURANTS = [
    {
        "id": "1",
        "name": "Doce Paixão",
        "category_id": "5",
        "image_url": "https://images.unsplash.com/photo-1565958011703-44f9829ba187",
        "cuisine": "Doces e Bolos",
        "delivery_time": "20-35 min",
        "min_order": "R$5,90",
        "rating": 4.9,
        "address_id": "1",
        "delivery_fee": 4.99,
    },
    {
        "id": "2",
        "name": "Restaurante Japonês",
        "category_id": "3",
        "image_url": "https://images.unsplash.com/photo-1579871494447-9811cf80d66c",
        "cuisine": "Japonesa",
        "delivery_time": "30-45 min",
        "min_order": "R$25,00",
        "rating": 4.9,
        "address_id": "2",
        "delivery_fee": 7.5,
    },
    {
        "id": "3",
        "name": "Churrascaria Gaúcha",
        "category_id": "2",
        "image_url": "https://images.unsplash.com/photo-1555939594-58d7cb561ad1",
        "cuisine": "Churrasco",
        "delivery_time": "35-50 min",
        "min_order": "R$30,00",
        "rating": 4.7,
        "address_id": "3",
    },
    {
        "id": "4",
        "name": "Comida Caseira",
        "category_id": "1",
        "image_url": "https://images.unsplash.com/photo-1547928576-f8d1c7a1b709",
        "cuisine": "Brasileira",
        "delivery_time": "20-35 min",
        "min_order": "R$12,90",
        "rating": 4.5,
        "address_id": "4",
    },
]

SAMPLE_MENU_ITEMS = [
    {
        "id": "101",
        "restaurant_id": "1",
        "name": "Bolo de Chocolate",
        "description": "Fatia de bolo de chocolate com ganache",
        "price": 14.9,
        "category": "Sobremesas",
        "rating": 4.8,
    },
    {
        "id": "102",
        "restaurant_id": "1",
        "name": "Brigadeiro Gourmet",
        "description": "Caixa com 6 unidades",
        "price": 18.0,
        "category": "Sobremesas",
        "rating": 4.9,
    },
    {
        "id": "201",
        "restaurant_id": "2",
        "name": "Combinado Salmão",
        "description": "20 peças de sushi e sashimi de salmão",
        "price": 59.9,
        "category": "Sushi",
        "rating": 4.7,
    },
    {
        "id": "202",
        "restaurant_id": "2",
        "name": "Temaki Filadélfia",
        "price": 24.5,
        "category": "Sushi",
    },
    {
        "id": "301",
        "restaurant_id": "3",
        "name": "Picanha na Brasa",
        "description": "400g com farofa e vinagrete",
        "price": 79.0,
        "category": "Churrasco",
        "rating": 4.6,
    },
]

SAMPLE_RESTAURANT_ADDRESSES = [
    {
        "id": "1",
        "user_id": "system",
        "street": "Av. Paulista",
        "number": "1500",
        "complement": "Loja 25",
        "city": "São Paulo",
        "is_default": False,
        "restaurant_id": "1",
        "is_restaurant_address": True,
    },
    {
        "id": "2",
        "user_id": "system",
        "street": "Rua Augusta",
        "number": "2200",
        "complement": "Piso 2",
        "city": "São Paulo",
        "is_default": False,
        "restaurant_id": "2",
        "is_restaurant_address": True,
    },
    {
        "id": "3",
        "user_id": "system",
        "street": "Av. Ipiranga",
        "number": "200",
        "complement": "Térreo",
        "city": "São Paulo",
        "is_default": False,
        "restaurant_id": "3",
        "is_restaurant_address": True,
    },
    {
        "id": "4",
        "user_id": "system",
        "street": "Rua Oscar Freire",
        "number": "498",
        "complement": "Loja 10",
        "city": "São Paulo",
        "is_default": False,
        "restaurant_id": "4",
        "is_restaurant_address": True,
    },
]

SAMPLE_DATA = {
    "categories": SAMPLE_CATEGORIES,
    "restaurants": SAMPLE_RESTAURANTS,
    "menuItems": SAMPLE_MENU_ITEMS,
    "addresses": SAMPLE_RESTAURANT_ADDRESSES,
}
