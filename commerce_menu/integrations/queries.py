"""
Catalog Service GraphQL queries.

The query text is opaque to the client: it is sent whole, only with its
whitespace collapsed to keep the GET URL short.
"""

# Root categories (children of the store root "2") with two nested levels.
CATEGORY_QUERY = """{
  categories(
    filters: {
      parent_id: {in: ["2"]}
    }
    pageSize: 100
    currentPage: 1
  ) {
    total_count
    items {
      uid
      id
      level
      name
      url_path
      path
      position
      children_count
      children {
        uid
        id
        level
        name
        path
        url_path
        position
        children_count
        children {
          uid
          id
          level
          name
          path
          url_path
          position
        }
      }
    }
    page_info {
      current_page
      page_size
      total_pages
    }
  }
}
"""
