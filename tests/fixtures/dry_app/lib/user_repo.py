# memoize: true

class UserRepo:
    def find(self, user_id):
        return {"id": user_id}
